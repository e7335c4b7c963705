"""
ProductConfig — immutable per-product configuration.

Built either directly (seed catalog, tests) or from an insurance
product record fetched by the Product Repository.  Store records keep
most bounds inside a ``coverage_details`` JSON document; ``from_record``
flattens that document onto typed fields.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from underwriting.core.constants import PaymentFrequency, ProductFamily


# coverage_details key → ProductConfig field
COVERAGE_DETAIL_KEYS: dict[str, str] = {
    "min_age_for_inscription": "min_age",
    "max_age_for_inscription": "max_age",
    "min_coverage_amount": "min_coverage",
    "max_coverage_amount": "max_coverage",
    "min_premium": "min_premium",
    "max_premium": "max_premium",
    "min_deductible": "min_deductible",
    "max_deductible": "max_deductible",
    "deductible_surcharges": "deductible_surcharges",
    "coinsurance_percentage": "coinsurance_percentage",
    "max_annual_out_of_pocket": "max_annual_out_of_pocket",
    "includes_dental_basic": "includes_dental_basic",
    "includes_dental_premium": "includes_dental_premium",
    "includes_vision_basic": "includes_vision_basic",
    "includes_vision_full": "includes_vision_full",
    "min_beneficiaries": "min_beneficiaries",
    "max_beneficiaries": "max_beneficiaries",
    "min_dependents": "min_dependents",
    "max_dependents": "max_dependents",
    "wellness_rebate_percentage": "wellness_rebate_percentage",
}


class ProductConfig(BaseModel):
    """
    Numeric bounds, fixed values, feature flags and cardinality limits
    of one insurance product.

    A zero cardinality limit is asymmetric across families:
    ``max_beneficiaries == 0`` means unlimited beneficiaries while
    ``max_dependents == 0`` means dependents are not allowed.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    family: ProductFamily

    # ── Numeric bounds ──────────────────────────
    min_age: int | None = None
    max_age: int | None = None
    min_coverage: float | None = None
    max_coverage: float | None = None
    min_premium: float | None = None
    max_premium: float | None = None
    min_deductible: float | None = None
    max_deductible: float | None = None

    # ── Fixed values ────────────────────────────
    base_premium: float | None = None
    coinsurance_percentage: float | None = None
    max_annual_out_of_pocket: float | None = None
    duration_months: int | None = None
    payment_frequency: PaymentFrequency | None = None
    deductible_surcharges: dict[float, float] | None = None
    wellness_rebate_percentage: float | None = None
    currency: str = "USD"

    # ── Feature flags ───────────────────────────
    includes_dental_basic: bool = False
    includes_dental_premium: bool = False
    includes_vision_basic: bool = False
    includes_vision_full: bool = False

    # ── Cardinality limits ──────────────────────
    min_beneficiaries: int | None = None
    max_beneficiaries: int | None = None
    min_dependents: int | None = None
    max_dependents: int | None = None

    is_active: bool = True

    @field_validator("deductible_surcharges", mode="before")
    @classmethod
    def _coerce_surcharge_keys(cls, value: Any) -> Any:
        # JSON documents only carry string keys
        if isinstance(value, Mapping):
            return {float(k): float(v) for k, v in value.items()}
        return value

    @classmethod
    def from_record(cls, record: Any) -> "ProductConfig":
        """
        Build a config from a product store record (ORM row or dict).

        Top-level columns: id, name, family, duration_months,
        base_premium, currency, is_active, fixed_payment_frequency.
        Everything else is read from ``coverage_details``.
        """
        if isinstance(record, Mapping):
            get = record.get
        else:
            def get(key: str, default: Any = None) -> Any:
                return getattr(record, key, default)

        details = get("coverage_details") or {}
        data: dict[str, Any] = {
            "id": str(get("id")),
            "name": get("name") or "",
            "family": get("family"),
            "duration_months": get("duration_months"),
            "base_premium": get("base_premium"),
            "currency": get("currency") or "USD",
            "is_active": get("is_active", True),
            "payment_frequency": get("fixed_payment_frequency"),
        }
        for key, field_name in COVERAGE_DETAIL_KEYS.items():
            if details.get(key) is not None:
                data[field_name] = details[key]

        # Single fixed deductible documents (generic health products)
        fixed_deductible = details.get("deductible")
        if fixed_deductible is not None:
            data.setdefault("min_deductible", fixed_deductible)
            data.setdefault("max_deductible", fixed_deductible)

        return cls.model_validate(data)

    def coverage_details(self) -> dict[str, Any]:
        """Inverse of ``from_record``: the JSON document for the store."""
        details: dict[str, Any] = {}
        for key, field_name in COVERAGE_DETAIL_KEYS.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            if field_name == "deductible_surcharges":
                value = {str(k): v for k, v in value.items()}
            details[key] = value
        return details


class ProductSummary(BaseModel):
    """Selection-list view of a product."""

    id: str
    name: str
    family: ProductFamily
    base_premium: float | None = None
    currency: str = "USD"
    duration_months: int | None = None
    payment_frequency: PaymentFrequency | None = Field(default=None)

    @classmethod
    def from_config(cls, config: ProductConfig) -> "ProductSummary":
        return cls(
            id=config.id,
            name=config.name,
            family=config.family,
            base_premium=config.base_premium,
            currency=config.currency,
            duration_months=config.duration_months,
            payment_frequency=config.payment_frequency,
        )
