"""Product Catalog — per-product configuration lookup."""

from underwriting.catalog.catalog import REQUIRED_BOUNDS, ProductCatalog, missing_bounds
from underwriting.catalog.product import ProductConfig, ProductSummary
from underwriting.catalog.seed import seed_products

__all__ = [
    "ProductCatalog",
    "ProductConfig",
    "ProductSummary",
    "REQUIRED_BOUNDS",
    "missing_bounds",
    "seed_products",
]
