"""
EvaluationContext — state carried through every rule step.

Built once per evaluation from an immutable product config and an
immutable draft.  Steps read from the context and hand back
violations; the engine accumulates them here.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any

from underwriting.catalog.product import ProductConfig
from underwriting.core.constants import ViolationRule
from underwriting.policy.draft import PolicyDraft
from underwriting.validation.dates import term_end_date
from underwriting.validation.violations import Violation

if TYPE_CHECKING:
    from underwriting.pipeline.families.base import FamilyRules


# ═══════════════════════════════════════════════════════════
#  StepResult
# ═══════════════════════════════════════════════════════════

@dataclass
class StepResult:
    """Outcome of a single rule step."""

    step_name: str
    status: str                     # StepStatus value
    violation_count: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "step_name": self.step_name,
            "status": self.status,
            "violation_count": self.violation_count,
            "metadata": self.metadata,
        }


# ═══════════════════════════════════════════════════════════
#  EvaluationContext
# ═══════════════════════════════════════════════════════════

@dataclass
class EvaluationContext:
    """
    Carries the inputs and the accumulated outcome of one evaluation.

    ``violations`` starts with the parse violations of the draft; a
    field that failed to parse is not reported again by later rules.
    """

    # ─── Inputs (set at init) ──────────────────────────
    product: ProductConfig
    draft: PolicyDraft
    rules: FamilyRules
    as_of: date
    evaluation_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # ─── Outcome ───────────────────────────────────────
    premium: float | None = None
    violations: list[Violation] = field(default_factory=list)
    step_results: list[StepResult] = field(default_factory=list)

    # ─── Derived inputs ────────────────────────────────

    @property
    def family(self) -> str:
        return self.product.family

    @property
    def age(self) -> int | None:
        return self.draft.insured_age(self.as_of)

    @property
    def expected_end_date(self) -> date | None:
        if self.draft.start_date is None or self.product.duration_months is None:
            return None
        return term_end_date(self.draft.start_date, self.product.duration_months)

    # ─── Violations ────────────────────────────────────

    def unparsed_fields(self) -> set[str]:
        return {v.field for v in self.violations if v.rule == ViolationRule.INVALID_VALUE}

    def add_violations(self, violations: list[Violation]) -> list[Violation]:
        """Record new violations, dropping those on fields that failed to parse."""
        unparsed = self.unparsed_fields()
        added = [v for v in violations if v.field not in unparsed]
        self.violations.extend(added)
        return added

    # ─── Logging ───────────────────────────────────────

    def to_summary_dict(self) -> dict[str, Any]:
        """Compact outcome summary for logging."""
        return {
            "product_id": self.product.id,
            "family": self.family,
            "as_of": self.as_of.isoformat(),
            "premium": self.premium,
            "violations": len(self.violations),
            "steps_run": len(self.step_results),
        }
