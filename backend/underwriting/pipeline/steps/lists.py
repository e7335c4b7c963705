"""
Beneficiary and dependent list steps.

Both delegate to the generic List Validator; the family rules supply
the count defaults, relationship limits and the child-age check.
"""

from __future__ import annotations

from underwriting.core.config import settings
from underwriting.pipeline.context import EvaluationContext
from underwriting.pipeline.step import RuleStep
from underwriting.validation import list_validator
from underwriting.validation.violations import Violation


class BeneficiariesStep(RuleStep):
    """Count, completeness and 100 % share of the beneficiary list."""

    name = "beneficiaries"
    description = "Beneficiary list"
    fields = ("beneficiaries",)

    def should_skip(self, ctx: EvaluationContext) -> bool:
        return not ctx.rules.has_beneficiaries

    def check(self, ctx: EvaluationContext) -> list[Violation]:
        beneficiaries = ctx.draft.beneficiaries
        minimum = ctx.product.min_beneficiaries
        if minimum is None:
            minimum = ctx.rules.min_beneficiaries

        violations = list_validator.validate_count(
            beneficiaries,
            minimum,
            ctx.product.max_beneficiaries,
            field="beneficiaries",
            unlimited_when_zero=True,
        )
        for index, beneficiary in enumerate(beneficiaries):
            violations += list_validator.validate_entry_completeness(
                beneficiary, list_name="beneficiaries", index=index,
            )
        violations += list_validator.validate_percentage_sum(beneficiaries)
        return violations


class DependentsStep(RuleStep):
    """Count, completeness, composition and ages of the dependent list."""

    name = "dependents"
    description = "Dependent list"
    fields = ("dependents",)

    def should_skip(self, ctx: EvaluationContext) -> bool:
        return not ctx.rules.has_dependents

    def check(self, ctx: EvaluationContext) -> list[Violation]:
        dependents = ctx.draft.dependents
        rules = ctx.rules
        minimum = ctx.product.min_dependents
        if minimum is None:
            minimum = rules.min_dependents

        violations = list_validator.validate_count(
            dependents,
            minimum,
            ctx.product.max_dependents,
            field="dependents",
        )
        for index, dependent in enumerate(dependents):
            violations += list_validator.validate_entry_completeness(
                dependent, list_name="dependents", index=index,
            )
            violations += list_validator.validate_birth_date_not_future(dependent, ctx.as_of, index=index)
            if rules.limit_child_age:
                violations += list_validator.validate_dependent_age(
                    dependent, ctx.as_of, index=index, ceiling=settings.CHILD_AGE_CEILING,
                )

        if rules.relationship_limits:
            violations += list_validator.validate_relationship_cardinality(
                dependents, rules.relationship_limits,
            )
        return violations
