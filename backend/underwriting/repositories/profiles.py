"""
Profile repository — agent/client directory used for selection lists.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from underwriting.core.constants import ProfileRole
from underwriting.db.models.profile import Profile


async def create_profile(
    db: AsyncSession,
    *,
    profile_id: str,
    full_name: str,
    email: str,
    role: str = ProfileRole.CLIENT.value,
) -> Profile:
    """Create a profile."""
    profile = Profile(
        id=profile_id,
        full_name=full_name.strip(),
        email=email.lower().strip(),
        role=ProfileRole(role.lower()).value,
    )
    db.add(profile)
    await db.flush()
    return profile


async def get_profile(db: AsyncSession, profile_id: str) -> Profile | None:
    """Fetch a profile by primary key."""
    return await db.get(Profile, profile_id)


async def list_profiles(
    db: AsyncSession,
    *,
    role: str | None = None,
    is_active: bool | None = True,
    offset: int = 0,
    limit: int = 100,
) -> list[Profile]:
    """List profiles with optional role/active filters, ordered by name."""
    stmt = select(Profile).order_by(Profile.full_name)
    if role is not None:
        stmt = stmt.where(Profile.role == role.lower())
    if is_active is not None:
        stmt = stmt.where(Profile.is_active == is_active)
    stmt = stmt.offset(offset).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())
