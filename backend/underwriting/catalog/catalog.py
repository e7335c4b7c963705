"""
ProductCatalog — read-only lookup of product configuration.

The catalog holds an immutable snapshot of ProductConfig objects that
the caller fetched upstream (Product Repository, seed data, tests).
``lookup`` is pure: it either returns a config whose family-required
bounds are all present, or raises ConfigurationError before any
validation or pricing runs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping

from underwriting.catalog.product import ProductConfig
from underwriting.core.constants import ProductFamily
from underwriting.core.logging import get_logger
from underwriting.errors import ConfigurationError

logger = get_logger(__name__)


_HEALTH_REQUIRED = (
    "duration_months",
    "min_deductible",
    "max_deductible",
    "coinsurance_percentage",
    "max_annual_out_of_pocket",
    "min_premium",
    "max_premium",
    "max_dependents",
)

# Bounds that must be configured for a product of each family
REQUIRED_BOUNDS: Mapping[ProductFamily, tuple[str, ...]] = MappingProxyType({
    ProductFamily.LIFE_BASIC: (
        "duration_months",
        "max_beneficiaries",
    ),
    ProductFamily.LIFE_SUPPLEMENTARY: (
        "duration_months",
        "min_age",
        "max_age",
        "min_coverage",
        "min_premium",
        "max_beneficiaries",
    ),
    ProductFamily.LIFE_DEPENDENTS: (
        "duration_months",
        "min_dependents",
        "max_dependents",
    ),
    ProductFamily.ADD_STANDALONE: (
        "duration_months",
        "min_age",
        "max_age",
        "min_coverage",
        "max_coverage",
        "min_premium",
        "max_beneficiaries",
    ),
    ProductFamily.HEALTH_BASIC: _HEALTH_REQUIRED,
    ProductFamily.HEALTH_INTERMEDIATE: _HEALTH_REQUIRED + ("base_premium", "deductible_surcharges"),
    ProductFamily.HEALTH_FAMILIAR: _HEALTH_REQUIRED,
    ProductFamily.HEALTH_PREMIER: _HEALTH_REQUIRED,
})


def missing_bounds(config: ProductConfig) -> list[str]:
    """Return the family-required bounds that are not configured."""
    required = REQUIRED_BOUNDS.get(config.family, ())
    return [name for name in required if getattr(config, name) is None]


class ProductCatalog:
    """
    Immutable product lookup.

    Usage::

        catalog = ProductCatalog(seed_products())
        config = catalog.lookup("prod-add-standalone")
    """

    def __init__(self, products: Iterable[ProductConfig] = ()) -> None:
        self._products: dict[str, ProductConfig] = {p.id: p for p in products}

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "ProductCatalog":
        """Build a catalog from Product Repository records."""
        return cls(ProductConfig.from_record(r) for r in records)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __len__(self) -> int:
        return len(self._products)

    def products(self) -> list[ProductConfig]:
        """All configured products, active or not."""
        return list(self._products.values())

    def lookup(self, product_id: str) -> ProductConfig:
        """
        Return the configuration for ``product_id``.

        Raises:
            ConfigurationError: unknown id, inactive product, or a bound
                required by the product's family is missing.
        """
        config = self._products.get(product_id)
        if config is None:
            logger.error("Unknown product", product_id=product_id)
            raise ConfigurationError(
                f"Unknown product '{product_id}'",
                product_id=product_id,
            )

        if not config.is_active:
            raise ConfigurationError(
                f"Product '{product_id}' is not active",
                product_id=product_id,
                family=config.family,
            )

        missing = missing_bounds(config)
        if missing:
            logger.error(
                "Product configuration incomplete",
                product_id=product_id,
                family=config.family,
                missing=missing,
            )
            raise ConfigurationError(
                f"Product '{product_id}' ({config.family}) is missing required bounds: "
                + ", ".join(missing),
                product_id=product_id,
                family=config.family,
                missing=missing,
            )

        return config
