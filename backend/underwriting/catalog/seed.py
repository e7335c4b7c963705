"""
Seed catalog — the eight standard products offered by the brokerage.

Used by the demo script, the tests and as the initial contents of the
products table.  Values mirror the limits printed on each intake form.
"""

from __future__ import annotations

from underwriting.catalog.product import ProductConfig
from underwriting.core.constants import PaymentFrequency, ProductFamily


SEED_PRODUCTS: list[dict] = [
    # ── Life ───────────────────────────────────────
    {
        "id": "prod-life-basic",
        "name": "Seguro de Vida Básico",
        "family": ProductFamily.LIFE_BASIC,
        "min_coverage": 1,
        "duration_months": 12,
        "min_beneficiaries": 1,
        "max_beneficiaries": 5,
    },
    {
        "id": "prod-life-supplementary",
        "name": "Seguro de Vida Suplementario",
        "family": ProductFamily.LIFE_SUPPLEMENTARY,
        "min_age": 18,
        "max_age": 60,
        "min_coverage": 10_000,
        "min_premium": 20,
        "duration_months": 12,
        "min_beneficiaries": 1,
        "max_beneficiaries": 3,
    },
    {
        "id": "prod-life-dependents",
        "name": "Seguro de Vida con Dependientes",
        "family": ProductFamily.LIFE_DEPENDENTS,
        "min_coverage": 1,
        "duration_months": 12,
        "min_dependents": 1,
        "max_dependents": 4,
    },
    {
        "id": "prod-add-standalone",
        "name": "Seguro por muerte accidental y desmembramiento (AD&D)",
        "family": ProductFamily.ADD_STANDALONE,
        "min_age": 18,
        "max_age": 65,
        "min_coverage": 5_000,
        "max_coverage": 100_000,
        "min_premium": 5,
        "duration_months": 12,
        "min_beneficiaries": 1,
        "max_beneficiaries": 3,
    },
    # ── Health ─────────────────────────────────────
    {
        "id": "prod-health-basic",
        "name": "Seguro de Salud Plan Básico",
        "family": ProductFamily.HEALTH_BASIC,
        "min_deductible": 2_000,
        "max_deductible": 5_000,
        "coinsurance_percentage": 30,
        "max_annual_out_of_pocket": 20_000,
        "min_premium": 50,
        "max_premium": 150,
        "base_premium": 50,
        "duration_months": 12,
        "payment_frequency": PaymentFrequency.MONTHLY,
        "max_dependents": 2,
    },
    {
        "id": "prod-health-intermediate",
        "name": "Seguro de Salud Plan Intermedio",
        "family": ProductFamily.HEALTH_INTERMEDIATE,
        "min_deductible": 1_000,
        "max_deductible": 2_500,
        "deductible_surcharges": {1_000: 20, 1_500: 10, 2_500: 0},
        "coinsurance_percentage": 20,
        "max_annual_out_of_pocket": 50_000,
        "base_premium": 150,
        "min_premium": 150,
        "max_premium": 400,
        "duration_months": 12,
        "includes_dental_basic": True,
        "max_dependents": 3,
    },
    {
        "id": "prod-health-familiar",
        "name": "Seguro de Salud Plan Familiar",
        "family": ProductFamily.HEALTH_FAMILIAR,
        "min_deductible": 1_500,
        "max_deductible": 3_000,
        "coinsurance_percentage": 20,
        "max_annual_out_of_pocket": 80_000,
        "min_premium": 300,
        "max_premium": 1_200,
        "duration_months": 12,
        "includes_dental_basic": True,
        "max_dependents": 4,
    },
    {
        "id": "prod-health-premier",
        "name": "Seguro de Salud Plan Premier",
        "family": ProductFamily.HEALTH_PREMIER,
        "min_deductible": 500,
        "max_deductible": 1_000,
        "coinsurance_percentage": 10,
        "max_annual_out_of_pocket": 100_000,
        "min_premium": 400,
        "max_premium": 1_500,
        "duration_months": 12,
        "includes_dental_premium": True,
        "includes_vision_full": True,
        "max_dependents": 4,
    },
]


def seed_products() -> list[ProductConfig]:
    """Return fresh ProductConfig objects for the seed catalog."""
    return [ProductConfig.model_validate(p) for p in SEED_PRODUCTS]
