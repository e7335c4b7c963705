"""
FixedValuesStep — values the product fixes rather than the applicant.

Coinsurance and max annual out-of-pocket may be omitted (the gate
fills them) but must not contradict the product.  Payment frequency
must match a product-fixed frequency, otherwise it is required.
"""

from __future__ import annotations

from underwriting.core.constants import ViolationRule
from underwriting.pipeline.context import EvaluationContext
from underwriting.pipeline.step import RuleStep
from underwriting.validation.violations import Violation


class FixedValuesStep(RuleStep):
    """Check coinsurance, max annual and payment frequency."""

    name = "fixed_values"
    description = "Coinsurance, max annual and payment frequency"
    fields = ("coinsurance", "max_annual", "payment_frequency")

    def check(self, ctx: EvaluationContext) -> list[Violation]:
        product = ctx.product
        draft = ctx.draft
        violations = []

        if ctx.rules.requires_deductible:
            fixed = (
                ("coinsurance", draft.coinsurance, product.coinsurance_percentage, "Coinsurance"),
                ("max_annual", draft.max_annual, product.max_annual_out_of_pocket, "Max annual out-of-pocket"),
            )
            for field, value, expected, label in fixed:
                if value is not None and expected is not None and value != expected:
                    violations.append(Violation(
                        field,
                        ViolationRule.FIXED_VALUE_MISMATCH,
                        f"{label} is fixed at {expected:g} for this product, got {value:g}",
                    ))

        if product.payment_frequency is not None:
            if draft.payment_frequency is not None and draft.payment_frequency != product.payment_frequency:
                violations.append(Violation(
                    "payment_frequency",
                    ViolationRule.FREQUENCY_MISMATCH,
                    f"This product is billed {product.payment_frequency}",
                ))
        elif draft.payment_frequency is None:
            violations.append(Violation("payment_frequency", ViolationRule.REQUIRED, "Payment frequency is required"))

        return violations
