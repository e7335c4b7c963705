"""
UnderwritingService — the exposed evaluate/build surface.

Wires the Product Catalog, family resolution, the validation pipeline
and the submission gate together.  Synchronous and pure: product
records must already be fetched into the catalog.  The same service
answers interactive feedback and the authoritative pre-persistence
check.

Usage::

    service = UnderwritingService(ProductCatalog(seed_products()))
    evaluation = service.evaluate("prod-life-basic", fields)
    outcome = service.build("prod-life-basic", fields)
    if outcome.ok:
        repository_insert(outcome.payload)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping

from underwriting.catalog.catalog import ProductCatalog
from underwriting.core.logging import get_logger
from underwriting.pipeline.context import EvaluationContext
from underwriting.pipeline.family_resolver import FamilyResolver
from underwriting.policy.draft import PolicyDraft, parse_draft
from underwriting.submission.payload_builder import build_payload
from underwriting.validation.violations import Violation

logger = get_logger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """Result of ``evaluate``: the premium (if priced here) and all violations."""

    premium: float | None
    violations: list[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def to_dict(self) -> dict[str, Any]:
        return {
            "premium": self.premium,
            "violations": [v.to_dict() for v in self.violations],
        }


@dataclass(frozen=True)
class BuildResult:
    """Result of ``build``: either a payload or the blocking violations."""

    payload: dict[str, Any] | None = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.payload is not None


class UnderwritingService:
    """Evaluate and build policy drafts against the product catalog."""

    def __init__(self, catalog: ProductCatalog, resolver: FamilyResolver | None = None) -> None:
        self.catalog = catalog
        self.resolver = resolver or FamilyResolver()

    def _prepare(
        self,
        product_id: str,
        draft_fields: Mapping[str, Any] | PolicyDraft,
        as_of: date | None,
    ) -> EvaluationContext:
        # Fatal configuration errors surface before any parsing or pricing
        product = self.catalog.lookup(product_id)
        rules = self.resolver.resolve(product)

        draft, parse_violations = parse_draft(draft_fields)
        if draft.product_id is None:
            draft = draft.model_copy(update={"product_id": product_id})

        return rules.new_context(
            draft,
            product,
            as_of=as_of or date.today(),
            violations=parse_violations,
        )

    def evaluate(
        self,
        product_id: str,
        draft_fields: Mapping[str, Any] | PolicyDraft,
        *,
        as_of: date | None = None,
    ) -> Evaluation:
        """
        Validate and price a draft.

        Raises:
            ConfigurationError: unknown/inactive product or missing bound.
        """
        ctx = self._prepare(product_id, draft_fields, as_of)
        result = ctx.rules.validate(ctx)
        return Evaluation(premium=result.premium, violations=result.violations)

    def evaluate_field(
        self,
        product_id: str,
        draft_fields: Mapping[str, Any] | PolicyDraft,
        field_name: str,
        *,
        as_of: date | None = None,
    ) -> Evaluation:
        """Incremental feedback for one field, using the same rules as ``evaluate``."""
        ctx = self._prepare(product_id, draft_fields, as_of)
        result = ctx.rules.validate_field(ctx, field_name)
        return Evaluation(premium=result.premium, violations=result.violations)

    def build(
        self,
        product_id: str,
        draft_fields: Mapping[str, Any] | PolicyDraft,
        *,
        as_of: date | None = None,
    ) -> BuildResult:
        """
        Validate a draft and, when clean, produce its storage payload.

        Raises:
            ConfigurationError: unknown/inactive product or missing bound.
        """
        ctx = self._prepare(product_id, draft_fields, as_of)
        result = ctx.rules.validate(ctx)

        if result.violations:
            logger.info(
                "Build rejected",
                evaluation_id=result.evaluation_id,
                product_id=product_id,
                violations=len(result.violations),
            )
            return BuildResult(violations=result.violations)

        payload = build_payload(result, ctx.draft, ctx.product, ctx.rules, as_of=ctx.as_of)
        logger.info("Payload ready", evaluation_id=result.evaluation_id, product_id=product_id)
        return BuildResult(payload=payload)
