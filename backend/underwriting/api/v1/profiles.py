"""Agent/client selection lists."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from underwriting.api.deps import get_db
from underwriting.api.schemas.directory import ProfileResponse
from underwriting.core.constants import ProfileRole
from underwriting.repositories import profiles as profile_repository

router = APIRouter(prefix="/profiles", tags=["Profiles"])


@router.get("", response_model=list[ProfileResponse])
async def list_profiles(
    role: ProfileRole | None = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    db: AsyncSession = Depends(get_db),
) -> list[ProfileResponse]:
    """Active profiles, optionally filtered by role."""
    profiles = await profile_repository.list_profiles(
        db,
        role=role.value if role else None,
        offset=offset,
        limit=limit,
    )
    return [ProfileResponse.model_validate(p) for p in profiles]
