"""
Health families — basic, intermediate, familiar and premier plans.

All health plans carry a product-fixed coinsurance and out-of-pocket
maximum, a deductible within the plan's range, and cannot start in
the past.
"""

from __future__ import annotations

from typing import Any

from underwriting.catalog.product import ProductConfig
from underwriting.core.constants import PremiumMode, ProductFamily
from underwriting.pipeline.families.base import FamilyRules
from underwriting.policy.draft import PolicyDraft
from underwriting.pricing import calculator


class HealthRules(FamilyRules):
    """Switches shared by every health plan."""

    requires_deductible = True
    start_not_in_past = True
    has_dependents = True

    def payload_overrides(self, draft: PolicyDraft, product: ProductConfig) -> dict[str, Any]:
        return {
            "has_dental_basic": bool(draft.has_dental_basic or product.includes_dental_basic),
            "has_vision_basic": bool(draft.has_vision_basic or product.includes_vision_basic),
            "wants_dental_premium": bool(draft.wants_dental_premium),
            "wants_vision": bool(draft.wants_vision),
        }


class HealthBasicRules(HealthRules):
    family = ProductFamily.HEALTH_BASIC
    premium_mode = PremiumMode.BOUNDED


class HealthIntermediateRules(HealthRules):
    """Base price plus deductible-tier surcharge and add-ons, capped at the plan maximum."""

    family = ProductFamily.HEALTH_INTERMEDIATE
    premium_mode = PremiumMode.DERIVED

    def compute_premium(self, draft, product, as_of=None):
        if draft.deductible is None:
            return None
        return calculator.health_intermediate_premium(
            base_premium=product.base_premium,
            max_premium=product.max_premium,
            deductible=draft.deductible,
            surcharges=product.deductible_surcharges,
            wants_dental_premium=bool(draft.wants_dental_premium),
            wants_vision=bool(draft.wants_vision),
            dependent_relationships=[d.relationship for d in draft.dependents],
        )


class HealthFamiliarRules(HealthRules):
    family = ProductFamily.HEALTH_FAMILIAR
    premium_mode = PremiumMode.BOUNDED


class HealthPremierRules(HealthRules):
    """Priced per dependent; premium dental and full vision are always included."""

    family = ProductFamily.HEALTH_PREMIER
    premium_mode = PremiumMode.DERIVED

    def compute_premium(self, draft, product, as_of=None):
        return calculator.health_premier_premium(
            len(draft.dependents),
            minimum=product.min_premium,
            maximum=product.max_premium,
        )

    def payload_overrides(self, draft: PolicyDraft, product: ProductConfig) -> dict[str, Any]:
        return {
            "has_dental_premium": bool(draft.has_dental_premium or product.includes_dental_premium),
            "has_vision_full": bool(draft.has_vision_full or product.includes_vision_full),
        }
