"""Product selection list."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from underwriting.api.deps import get_db
from underwriting.catalog.product import ProductConfig, ProductSummary
from underwriting.repositories import products as product_repository

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductSummary])
async def list_products(db: AsyncSession = Depends(get_db)) -> list[ProductSummary]:
    """Active products, ordered by name."""
    products = await product_repository.list_products(db)
    return [ProductSummary.from_config(ProductConfig.from_record(p)) for p in products]
