"""
Premium Calculator — one pure pricing function per derived family.

No I/O, no randomness.  Callers round to cents when presenting or
storing the result; the functions return the unrounded value.
"""

from __future__ import annotations

from typing import Sequence

from underwriting.core.constants import PaymentFrequency, Relationship

FREQUENCY_MULTIPLIERS: dict[PaymentFrequency, int] = {
    PaymentFrequency.MONTHLY: 1,
    PaymentFrequency.QUARTERLY: 3,
    PaymentFrequency.ANNUALLY: 12,
}

# ── AD&D standalone ─────────────────────────────
ADD_BASE_RATE = 0.0005
ADD_RATE_OVER_40 = 0.00001
ADD_RATE_OVER_50 = 0.00002

# ── Life basic ──────────────────────────────────
LIFE_BASIC_RATE = 0.001

# ── Health intermediate add-ons ─────────────────
DENTAL_PREMIUM_ADDON = 25.0
VISION_ADDON = 10.0
SPOUSE_ADDON = 60.0
CHILD_ADDON = 40.0

# ── Health premier ──────────────────────────────
PREMIER_BASE = 400.0
PREMIER_PER_DEPENDENT = 100.0
PREMIER_CAP = 1500.0


def frequency_multiplier(frequency: PaymentFrequency | str | None) -> int:
    """Monthly 1, quarterly 3, annually 12.  Unset means monthly."""
    if frequency is None:
        return 1
    return FREQUENCY_MULTIPLIERS[PaymentFrequency(frequency)]


def add_standalone_rate(age: int) -> float:
    """Monthly rate per unit of coverage, loaded after 40 and again after 50."""
    return (
        ADD_BASE_RATE
        + max(0, age - 40) * ADD_RATE_OVER_40
        + max(0, age - 50) * ADD_RATE_OVER_50
    )


def add_standalone_premium(
    coverage_amount: float,
    age: int,
    frequency: PaymentFrequency | str | None,
) -> float:
    """
    Standalone AD&D premium.

    The result is checked against the product's premium floor by the
    pipeline, never clamped here.
    """
    return coverage_amount * add_standalone_rate(age) * frequency_multiplier(frequency)


def life_basic_premium(
    coverage_amount: float,
    frequency: PaymentFrequency | str | None,
) -> float:
    """Basic life premium; the AD&D rider always equals the coverage amount."""
    return coverage_amount * LIFE_BASIC_RATE * frequency_multiplier(frequency)


def deductible_surcharge(deductible: float | None, surcharges: dict[float, float] | None) -> float:
    """Surcharge for the selected deductible tier; unknown tiers carry none."""
    if deductible is None or not surcharges:
        return 0.0
    return float(surcharges.get(float(deductible), 0.0))


def health_intermediate_premium(
    *,
    base_premium: float,
    max_premium: float,
    deductible: float | None,
    surcharges: dict[float, float] | None,
    wants_dental_premium: bool,
    wants_vision: bool,
    dependent_relationships: Sequence[str],
) -> float:
    """
    Base + deductible tier surcharge + optional add-ons + per-dependent
    add-ons, clamped to ``[base_premium, max_premium]``.
    """
    premium = base_premium + deductible_surcharge(deductible, surcharges)
    if wants_dental_premium:
        premium += DENTAL_PREMIUM_ADDON
    if wants_vision:
        premium += VISION_ADDON
    for relationship in dependent_relationships:
        if relationship == Relationship.SPOUSE:
            premium += SPOUSE_ADDON
        elif relationship == Relationship.CHILD:
            premium += CHILD_ADDON
    return min(max(premium, base_premium), max_premium)


def health_premier_premium(
    num_dependents: int,
    *,
    minimum: float = PREMIER_BASE,
    maximum: float = PREMIER_CAP,
) -> float:
    """400 plus 100 per dependent, kept within the product's premium range."""
    return min(max(PREMIER_BASE + num_dependents * PREMIER_PER_DEPENDENT, minimum), maximum)
