"""
ReferencesStep — product, agent and client must be referenced.

Fatal: without the references nothing else about the draft can be
attributed, so the evaluation stops here.
"""

from __future__ import annotations

from underwriting.core.constants import ViolationRule
from underwriting.pipeline.context import EvaluationContext
from underwriting.pipeline.step import RuleStep
from underwriting.validation.violations import Violation


class ReferencesStep(RuleStep):
    """Check the product/agent/client references."""

    name = "references"
    description = "Product, agent and client references"
    fields = ("product_id", "agent_id", "client_id")
    fatal = True

    def check(self, ctx: EvaluationContext) -> list[Violation]:
        violations = []
        draft = ctx.draft

        if not draft.product_id:
            violations.append(Violation("product_id", ViolationRule.MISSING_REFERENCE, "Product is required"))
        elif draft.product_id != ctx.product.id:
            violations.append(Violation(
                "product_id",
                ViolationRule.MISSING_REFERENCE,
                f"Draft references product '{draft.product_id}', evaluated against '{ctx.product.id}'",
            ))

        if not draft.agent_id:
            violations.append(Violation("agent_id", ViolationRule.MISSING_REFERENCE, "Agent is required"))
        if not draft.client_id:
            violations.append(Violation("client_id", ViolationRule.MISSING_REFERENCE, "Client is required"))

        return violations
