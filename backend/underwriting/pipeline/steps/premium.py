"""
PremiumStep — the family's pricing rule.

    DERIVED   computed premium checked against the product floor; a
              caller-supplied premium must match it
    BOUNDED   user premium range-checked against the product bounds
    EXTERNAL  priced outside this package, nothing to check
"""

from __future__ import annotations

from underwriting.core.config import settings
from underwriting.core.constants import PremiumMode, ViolationRule
from underwriting.pipeline.context import EvaluationContext
from underwriting.pipeline.step import RuleStep
from underwriting.pipeline.steps.ranges import check_range
from underwriting.validation.violations import Violation


class PremiumStep(RuleStep):
    """Apply the family's derived or bounded premium rule."""

    name = "premium"
    description = "Premium floor, bounds and consistency"
    fields = ("premium_amount",)

    def should_skip(self, ctx: EvaluationContext) -> bool:
        return ctx.rules.premium_mode == PremiumMode.EXTERNAL

    def check(self, ctx: EvaluationContext) -> list[Violation]:
        if ctx.rules.premium_mode == PremiumMode.BOUNDED:
            return check_range(
                "premium_amount",
                ctx.draft.premium_amount,
                ctx.product.min_premium,
                ctx.product.max_premium,
                label="Premium",
                required=True,
            )
        return self._check_derived(ctx)

    def _check_derived(self, ctx: EvaluationContext) -> list[Violation]:
        # Missing pricing inputs are reported by the range steps
        if ctx.premium is None:
            return []

        violations = []
        floor = ctx.product.min_premium
        if floor is not None and ctx.premium < floor:
            violations.append(Violation(
                "premium_amount",
                ViolationRule.PREMIUM_FLOOR,
                f"Premium {ctx.premium:.2f} is below the minimum of {floor:.2f}",
            ))

        supplied = ctx.draft.premium_amount
        if supplied is not None and round(abs(supplied - ctx.premium), 6) > settings.PREMIUM_MATCH_TOLERANCE:
            violations.append(Violation(
                "premium_amount",
                ViolationRule.PREMIUM_MISMATCH,
                f"Premium {supplied:.2f} does not match the calculated {ctx.premium:.2f}",
            ))
        return violations
