"""
DatesStep — term dates and the insured's birth date.

    - start_date is required
    - end_date, when given, must follow start_date and match the term
    - families that refuse back-dated cover require start_date >= today
"""

from __future__ import annotations

from underwriting.core.config import settings
from underwriting.core.constants import ViolationRule
from underwriting.pipeline.context import EvaluationContext
from underwriting.pipeline.step import RuleStep
from underwriting.validation.violations import Violation


class DatesStep(RuleStep):
    """Validate start/end dates against the product term."""

    name = "dates"
    description = "Start/end date validity and term length"
    fields = ("start_date", "end_date", "insured_birth_date")

    def check(self, ctx: EvaluationContext) -> list[Violation]:
        violations = []
        draft = ctx.draft

        if draft.start_date is None:
            violations.append(Violation("start_date", ViolationRule.REQUIRED, "Start date is required"))
        else:
            if (
                ctx.rules.start_not_in_past
                and settings.HEALTH_START_NOT_IN_PAST
                and draft.start_date < ctx.as_of
            ):
                violations.append(Violation(
                    "start_date",
                    ViolationRule.START_IN_PAST,
                    f"Start date cannot be before {ctx.as_of.isoformat()}",
                ))

            if draft.end_date is not None:
                expected = ctx.expected_end_date
                if draft.end_date <= draft.start_date:
                    violations.append(Violation(
                        "end_date", ViolationRule.DATE_ORDER, "End date must be after start date",
                    ))
                elif expected is not None and draft.end_date != expected:
                    violations.append(Violation(
                        "end_date",
                        ViolationRule.TERM_MISMATCH,
                        f"End date must be {expected.isoformat()} for a "
                        f"{ctx.product.duration_months}-month term",
                    ))

        if draft.insured_birth_date is not None and draft.insured_birth_date > ctx.as_of:
            violations.append(Violation(
                "insured_birth_date", ViolationRule.INVALID_DATE, "Birth date cannot be in the future",
            ))

        return violations
