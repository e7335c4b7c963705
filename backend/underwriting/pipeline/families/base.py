"""
FamilyRules — the shared interface of every product family.

Each family is a subclass that declares its rule switches as class
attributes and implements ``compute_premium``.  The step sequence,
validation run and payload overrides come from this base class and
are extended only where a family needs something extra.
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Any, ClassVar, Mapping

from underwriting.catalog.product import ProductConfig
from underwriting.core.constants import PremiumMode, ProductFamily
from underwriting.pipeline.context import EvaluationContext
from underwriting.pipeline.engine import EvaluationResult, ValidationPipeline
from underwriting.pipeline.step import RuleStep
from underwriting.pipeline.steps import (
    BeneficiariesStep,
    DatesStep,
    DependentsStep,
    FixedValuesStep,
    PremiumStep,
    RangesStep,
    ReferencesStep,
)
from underwriting.policy.draft import PolicyDraft
from underwriting.validation.violations import Violation


class FamilyRules:
    """
    Base class for every product family.

    Subclasses MUST set:
        - family (ProductFamily)
        - premium_mode (PremiumMode)

    Subclasses MAY override:
        - compute_premium(draft, product, as_of)
        - extra_steps()         — family-only steps, run after premium
        - payload_overrides()   — values forced into the payload
    """

    family: ClassVar[ProductFamily]
    premium_mode: ClassVar[PremiumMode] = PremiumMode.BOUNDED

    requires_coverage: ClassVar[bool] = False
    requires_deductible: ClassVar[bool] = False
    start_not_in_past: ClassVar[bool] = False

    has_beneficiaries: ClassVar[bool] = False
    min_beneficiaries: ClassVar[int | None] = None

    has_dependents: ClassVar[bool] = False
    min_dependents: ClassVar[int | None] = None
    relationship_limits: ClassVar[Mapping[str, int]] = MappingProxyType({})
    limit_child_age: ClassVar[bool] = False

    # ─── Pricing ───────────────────────────────────────

    def compute_premium(
        self,
        draft: PolicyDraft,
        product: ProductConfig,
        as_of: date | None = None,
    ) -> float | None:
        """
        The premium the evaluation reports.

        Bounded families report the applicant's own figure; external
        families report nothing.  Derived families override this and
        return ``None`` while a pricing input is missing.
        """
        if self.premium_mode == PremiumMode.BOUNDED:
            return draft.premium_amount
        return None

    # ─── Steps ─────────────────────────────────────────

    def extra_steps(self) -> list[RuleStep]:
        return []

    def steps(self) -> list[RuleStep]:
        """Ordered rule steps for this family."""
        return [
            ReferencesStep(),
            DatesStep(),
            RangesStep(),
            PremiumStep(),
            *self.extra_steps(),
            FixedValuesStep(),
            BeneficiariesStep(),
            DependentsStep(),
        ]

    # ─── Validation ────────────────────────────────────

    def new_context(
        self,
        draft: PolicyDraft,
        product: ProductConfig,
        *,
        as_of: date,
        violations: list[Violation] | None = None,
    ) -> EvaluationContext:
        """Build a context with the premium already priced."""
        ctx = EvaluationContext(
            product=product,
            draft=draft,
            rules=self,
            as_of=as_of,
            violations=list(violations or []),
        )
        premium = self.compute_premium(draft, product, ctx.as_of)
        ctx.premium = round(premium, 2) if premium is not None else None
        return ctx

    def validate(self, ctx: EvaluationContext) -> EvaluationResult:
        """Full pipeline run for this family."""
        return ValidationPipeline().run(ctx, self.steps())

    def validate_field(self, ctx: EvaluationContext, field_name: str) -> EvaluationResult:
        """Single-field run sharing the same rule steps."""
        return ValidationPipeline().run_field(ctx, self.steps(), field_name)

    # ─── Submission ────────────────────────────────────

    def payload_overrides(self, draft: PolicyDraft, product: ProductConfig) -> dict[str, Any]:
        """Family-forced payload values, applied before the applicability filter."""
        return {}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.family}>"
