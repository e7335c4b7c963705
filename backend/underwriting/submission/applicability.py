"""
Field applicability matrix.

Every payload carries every key; a key outside its family's set is
stored as ``None`` so life fields never leak into a health policy and
vice versa.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from underwriting.core.constants import ProductFamily

COMMON_FIELDS = frozenset({
    "product_id",
    "client_id",
    "agent_id",
    "start_date",
    "end_date",
    "premium_amount",
    "payment_frequency",
    "status",
    "contract_details",
})

LIFE_FIELDS = frozenset({
    "coverage_amount",
    "ad_d_included",
    "ad_d_coverage",
    "beneficiaries",
    "num_beneficiaries",
    "age_at_inscription",
    "max_age_inscription",
    "wellness_rebate",
})

HEALTH_FIELDS = frozenset({
    "deductible",
    "coinsurance",
    "max_annual",
    "has_dental",
    "has_vision",
    "dependents_details",
    "num_dependents",
    "age_at_inscription",
    "max_age_inscription",
})

HEALTH_OPTION_FIELDS = frozenset({
    "has_dental_basic",
    "wants_dental_premium",
    "has_vision_basic",
    "wants_vision",
})

PREMIER_FIELDS = frozenset({"has_dental_premium", "has_vision_full"})

APPLICABLE_FIELDS: Mapping[ProductFamily, frozenset[str]] = MappingProxyType({
    ProductFamily.LIFE_BASIC: LIFE_FIELDS,
    ProductFamily.LIFE_SUPPLEMENTARY: LIFE_FIELDS,
    ProductFamily.ADD_STANDALONE: frozenset({
        "coverage_amount",
        "beneficiaries",
        "num_beneficiaries",
        "age_at_inscription",
        "max_age_inscription",
    }),
    ProductFamily.LIFE_DEPENDENTS: frozenset({
        "coverage_amount",
        "ad_d_included",
        "dependents_details",
        "num_dependents",
    }),
    ProductFamily.HEALTH_BASIC: HEALTH_FIELDS,
    ProductFamily.HEALTH_INTERMEDIATE: HEALTH_FIELDS | HEALTH_OPTION_FIELDS,
    ProductFamily.HEALTH_FAMILIAR: HEALTH_FIELDS | HEALTH_OPTION_FIELDS,
    ProductFamily.HEALTH_PREMIER: HEALTH_FIELDS | PREMIER_FIELDS,
})

PAYLOAD_FIELDS: tuple[str, ...] = tuple(sorted(
    COMMON_FIELDS | LIFE_FIELDS | HEALTH_FIELDS | HEALTH_OPTION_FIELDS | PREMIER_FIELDS
))


def applicable_fields(family: ProductFamily) -> frozenset[str]:
    """Payload keys that may carry a value for ``family``."""
    return COMMON_FIELDS | APPLICABLE_FIELDS[family]
