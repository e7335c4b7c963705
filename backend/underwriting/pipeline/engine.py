"""
ValidationPipeline — the orchestrator that runs rule steps in order.

Responsibilities:
    - Execute each step against the EvaluationContext
    - Accumulate non-fatal violations instead of stopping
    - Halt on the first fatal step that reports a violation
    - Support a single-field run sharing the same rule steps
    - Return a complete EvaluationResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from underwriting.core.constants import EvaluationStatus, StepStatus
from underwriting.pipeline.context import EvaluationContext, StepResult
from underwriting.pipeline.step import RuleStep
from underwriting.validation.violations import Violation


@dataclass
class EvaluationResult:
    """Final outcome of a pipeline run."""

    evaluation_id: str
    status: str                     # EvaluationStatus value
    premium: float | None = None
    violations: list[Violation] = field(default_factory=list)
    step_results: list[dict[str, Any]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations


class ValidationPipeline:
    """
    Runs a sequence of RuleStep objects against an EvaluationContext.

    Usage::

        pipeline = ValidationPipeline()
        result = pipeline.run(ctx, rules.steps())
        single = pipeline.run_field(ctx, rules.steps(), "beneficiaries")
    """

    def __init__(self) -> None:
        self.logger = structlog.get_logger("underwriting.pipeline")

    def run(self, ctx: EvaluationContext, steps: list[RuleStep]) -> EvaluationResult:
        """Full run: every step, in order, accumulating violations."""
        log = self.logger.bind(evaluation_id=ctx.evaluation_id, total_steps=len(steps))
        log.debug(
            "Evaluation started",
            product_id=ctx.product.id,
            family=ctx.family,
            parse_violations=len(ctx.violations),
        )

        status = self._run_steps(ctx, steps, log)

        if status != EvaluationStatus.HALTED:
            status = EvaluationStatus.FAILED if ctx.violations else EvaluationStatus.PASSED

        log.info("Evaluation finished", status=status, **ctx.to_summary_dict())
        return EvaluationResult(
            evaluation_id=ctx.evaluation_id,
            status=status,
            premium=ctx.premium,
            violations=list(ctx.violations),
            step_results=[sr.to_dict() for sr in ctx.step_results],
        )

    def run_field(
        self,
        ctx: EvaluationContext,
        steps: list[RuleStep],
        field_name: str,
    ) -> EvaluationResult:
        """
        Single-field run for incremental feedback.

        Only the steps that report on ``field_name`` are executed and
        only violations concerning that field are returned.
        """
        relevant = [s for s in steps if s.concerns(field_name)]
        log = self.logger.bind(
            evaluation_id=ctx.evaluation_id,
            product_id=ctx.product.id,
            field=field_name,
        )
        status = self._run_steps(ctx, relevant, log)

        violations = [v for v in ctx.violations if v.applies_to(field_name)]
        if status != EvaluationStatus.HALTED:
            status = EvaluationStatus.FAILED if violations else EvaluationStatus.PASSED

        log.debug("Field evaluated", status=status, violations=len(violations))
        return EvaluationResult(
            evaluation_id=ctx.evaluation_id,
            status=status,
            premium=ctx.premium,
            violations=violations,
            step_results=[sr.to_dict() for sr in ctx.step_results],
        )

    def _run_steps(
        self,
        ctx: EvaluationContext,
        steps: list[RuleStep],
        log: structlog.BoundLogger,
    ) -> str:
        for step in steps:
            step_log = log.bind(step_name=step.name)

            if step.should_skip(ctx):
                ctx.step_results.append(StepResult(step_name=step.name, status=StepStatus.SKIPPED))
                step_log.debug("Step skipped")
                continue

            added = ctx.add_violations(step.check(ctx))
            ctx.step_results.append(StepResult(
                step_name=step.name,
                status=StepStatus.FAILED if added else StepStatus.PASSED,
                violation_count=len(added),
            ))

            if added:
                step_log.debug(
                    "Step reported violations",
                    violations=[v.field for v in added],
                )
                if step.fatal:
                    # A halted evaluation reports no premium
                    ctx.premium = None
                    step_log.warning("Fatal step failed, evaluation halted")
                    return EvaluationStatus.HALTED

        return EvaluationStatus.PASSED
