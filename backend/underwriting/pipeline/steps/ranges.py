"""
RangesStep — numeric bounds from the product configuration.

Age, coverage and deductible are checked against the configured
min/max.  A value is required whenever its family uses it or the
product configures a bound for it.
"""

from __future__ import annotations

from underwriting.core.constants import ViolationRule
from underwriting.pipeline.context import EvaluationContext
from underwriting.pipeline.step import RuleStep
from underwriting.validation.violations import Violation


def check_range(
    field: str,
    value: float | None,
    minimum: float | None,
    maximum: float | None,
    *,
    label: str,
    required: bool = False,
) -> list[Violation]:
    """Shared bound check; ``None`` bounds are open."""
    if value is None:
        if required:
            return [Violation(field, ViolationRule.REQUIRED, f"{label} is required")]
        return []
    if minimum is not None and value < minimum:
        return [Violation(field, ViolationRule.OUT_OF_RANGE, f"{label} must be at least {minimum:g}, got {value:g}")]
    if maximum is not None and value > maximum:
        return [Violation(field, ViolationRule.OUT_OF_RANGE, f"{label} must be at most {maximum:g}, got {value:g}")]
    return []


class RangesStep(RuleStep):
    """Check age, coverage and deductible against product bounds."""

    name = "ranges"
    description = "Age, coverage and deductible bounds"
    fields = ("age_at_inscription", "insured_birth_date", "coverage_amount", "deductible")

    def check(self, ctx: EvaluationContext) -> list[Violation]:
        product = ctx.product
        rules = ctx.rules
        violations = []

        age_bounded = product.min_age is not None or product.max_age is not None
        violations += check_range(
            "age_at_inscription",
            ctx.age,
            product.min_age,
            product.max_age,
            label="Age at inscription",
            required=age_bounded,
        )

        if rules.requires_coverage:
            coverage = ctx.draft.coverage_amount
            if coverage is not None and coverage <= 0:
                violations.append(Violation(
                    "coverage_amount", ViolationRule.OUT_OF_RANGE, "Coverage amount must be greater than 0",
                ))
            else:
                violations += check_range(
                    "coverage_amount",
                    coverage,
                    product.min_coverage,
                    product.max_coverage,
                    label="Coverage amount",
                    required=True,
                )

        if rules.requires_deductible:
            violations += check_range(
                "deductible",
                ctx.draft.deductible,
                product.min_deductible,
                product.max_deductible,
                label="Deductible",
                required=True,
            )

        return violations
