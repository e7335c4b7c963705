"""
Product repository — data access for the insurance_products table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from underwriting.catalog.catalog import ProductCatalog
from underwriting.catalog.product import ProductConfig
from underwriting.db.models.product import InsuranceProduct


async def get_product(db: AsyncSession, product_id: str) -> InsuranceProduct | None:
    """Fetch a product by primary key."""
    return await db.get(InsuranceProduct, product_id)


async def list_products(
    db: AsyncSession,
    *,
    active_only: bool = True,
) -> list[InsuranceProduct]:
    """List products ordered by name."""
    stmt = select(InsuranceProduct).order_by(InsuranceProduct.name)
    if active_only:
        stmt = stmt.where(InsuranceProduct.is_active.is_(True))
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def save_product(db: AsyncSession, config: ProductConfig) -> InsuranceProduct:
    """Insert or overwrite a product from its configuration."""
    product = await get_product(db, config.id)
    if product is None:
        product = InsuranceProduct(id=config.id)
        db.add(product)

    product.name = config.name
    product.family = str(config.family)
    product.duration_months = config.duration_months
    product.base_premium = config.base_premium
    product.currency = config.currency
    product.fixed_payment_frequency = str(config.payment_frequency) if config.payment_frequency else None
    product.coverage_details = config.coverage_details()
    product.is_active = config.is_active

    await db.flush()
    return product


async def load_catalog(db: AsyncSession) -> ProductCatalog:
    """
    Snapshot every product into a ProductCatalog.

    Inactive products are included so lookups report them as inactive
    rather than unknown.
    """
    products = await list_products(db, active_only=False)
    return ProductCatalog.from_records(products)
