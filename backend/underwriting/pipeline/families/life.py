"""
Life families — basic, supplementary, with dependents, standalone AD&D.
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Any

from underwriting.catalog.product import ProductConfig
from underwriting.core.constants import PremiumMode, ProductFamily, Relationship
from underwriting.pipeline.families.base import FamilyRules
from underwriting.pipeline.step import RuleStep
from underwriting.pipeline.steps import AdDRiderStep
from underwriting.policy.draft import PolicyDraft
from underwriting.pricing import calculator


def _frequency(draft: PolicyDraft, product: ProductConfig):
    return product.payment_frequency or draft.payment_frequency


class LifeBasicRules(FamilyRules):
    """Coverage-rated life cover with the AD&D rider at 100 %."""

    family = ProductFamily.LIFE_BASIC
    premium_mode = PremiumMode.DERIVED
    requires_coverage = True
    has_beneficiaries = True
    min_beneficiaries = 1

    def compute_premium(self, draft, product, as_of=None):
        if not draft.coverage_amount or draft.coverage_amount <= 0:
            return None
        return calculator.life_basic_premium(draft.coverage_amount, _frequency(draft, product))

    def payload_overrides(self, draft: PolicyDraft, product: ProductConfig) -> dict[str, Any]:
        return {"ad_d_included": True, "ad_d_coverage": draft.coverage_amount}


class LifeSupplementaryRules(FamilyRules):
    """Applicant-chosen premium with an optional AD&D rider."""

    family = ProductFamily.LIFE_SUPPLEMENTARY
    premium_mode = PremiumMode.BOUNDED
    requires_coverage = True
    has_beneficiaries = True
    min_beneficiaries = 1

    def extra_steps(self) -> list[RuleStep]:
        return [AdDRiderStep()]

    def payload_overrides(self, draft: PolicyDraft, product: ProductConfig) -> dict[str, Any]:
        included = bool(draft.ad_d_included)
        return {
            "ad_d_included": included,
            "ad_d_coverage": draft.ad_d_coverage if included else None,
        }


class LifeDependentsRules(FamilyRules):
    """
    Life cover for the insured's family.

    Priced by the agent outside this package; only the composition of
    the dependent list is validated.
    """

    family = ProductFamily.LIFE_DEPENDENTS
    premium_mode = PremiumMode.EXTERNAL
    requires_coverage = True
    has_dependents = True
    min_dependents = 1
    relationship_limits = MappingProxyType({Relationship.SPOUSE: 1, Relationship.CHILD: 3})
    limit_child_age = True

    def payload_overrides(self, draft: PolicyDraft, product: ProductConfig) -> dict[str, Any]:
        return {"ad_d_included": bool(draft.ad_d_included)}


class AddStandaloneRules(FamilyRules):
    """Accidental death & dismemberment sold on its own, age-rated."""

    family = ProductFamily.ADD_STANDALONE
    premium_mode = PremiumMode.DERIVED
    requires_coverage = True
    has_beneficiaries = True
    min_beneficiaries = 1

    def compute_premium(self, draft, product, as_of: date | None = None):
        age = draft.insured_age(as_of or date.today())
        if not draft.coverage_amount or draft.coverage_amount <= 0 or age is None:
            return None
        return calculator.add_standalone_premium(draft.coverage_amount, age, _frequency(draft, product))
