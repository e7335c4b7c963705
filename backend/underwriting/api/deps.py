"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from underwriting.db.session import session_scope
from underwriting.errors import ConfigurationError
from underwriting.repositories import products as product_repository
from underwriting.service import UnderwritingService


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session from the sessionmaker built at startup."""
    async for session in session_scope(request.app.state.sessionmaker):
        yield session


async def get_service(db: AsyncSession = Depends(get_db)) -> UnderwritingService:
    """Underwriting service over a fresh snapshot of the product store."""
    catalog = await product_repository.load_catalog(db)
    return UnderwritingService(catalog)


def configuration_http_error(exc: ConfigurationError) -> HTTPException:
    """Map a fatal configuration error to a 404 carrying its message."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"message": str(exc), "product_id": exc.product_id, "missing": exc.missing},
    )
