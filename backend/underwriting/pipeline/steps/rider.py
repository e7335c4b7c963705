"""AdDRiderStep — optional AD&D rider bounded by twice the life coverage."""

from __future__ import annotations

from underwriting.pipeline.context import EvaluationContext
from underwriting.pipeline.step import RuleStep
from underwriting.pipeline.steps.ranges import check_range
from underwriting.validation.violations import Violation

RIDER_MIN = 1.0
RIDER_COVERAGE_FACTOR = 2


class AdDRiderStep(RuleStep):
    """When the rider is included its amount must lie in [1, 2 × coverage]."""

    name = "add_rider"
    description = "AD&D rider amount"
    fields = ("ad_d_included", "ad_d_coverage")

    def should_skip(self, ctx: EvaluationContext) -> bool:
        return not ctx.draft.ad_d_included

    def check(self, ctx: EvaluationContext) -> list[Violation]:
        coverage = ctx.draft.coverage_amount
        maximum = coverage * RIDER_COVERAGE_FACTOR if coverage else None
        return check_range(
            "ad_d_coverage",
            ctx.draft.ad_d_coverage,
            RIDER_MIN,
            maximum,
            label="AD&D coverage",
            required=True,
        )
