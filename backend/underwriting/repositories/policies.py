"""
Policy repository — inserts Submission Gate payloads.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

import secrets
import string
import time
import uuid
from datetime import date
from typing import Any, Mapping

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from underwriting.core.constants import PolicyStatus
from underwriting.core.logging import get_logger
from underwriting.db.models.policy import Policy
from underwriting.errors import PersistenceError

logger = get_logger(__name__)

POLICY_NUMBER_ALPHABET = string.ascii_uppercase + string.digits
POLICY_NUMBER_SUFFIX_LENGTH = 6

_DATE_COLUMNS = ("start_date", "end_date")


def generate_policy_number(now_ms: int | None = None) -> str:
    """``POL-<epoch millis>-<6 uppercase alphanumerics>``."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(POLICY_NUMBER_ALPHABET) for _ in range(POLICY_NUMBER_SUFFIX_LENGTH))
    return f"POL-{now_ms}-{suffix}"


def _column_values(payload: Mapping[str, Any]) -> dict[str, Any]:
    columns = set(Policy.__table__.columns.keys()) - {"id", "created_at", "updated_at"}
    values = {k: v for k, v in payload.items() if k in columns}
    for key in _DATE_COLUMNS:
        if isinstance(values.get(key), str):
            values[key] = date.fromisoformat(values[key])
    return values


async def create_policy(
    db: AsyncSession,
    payload: Mapping[str, Any],
    *,
    policy_number: str | None = None,
) -> Policy:
    """
    Insert a policy from a built payload.

    Raises:
        PersistenceError: The payload is not pending or the insert failed.
    """
    if payload.get("status") != PolicyStatus.PENDING:
        raise PersistenceError(
            f"Only pending policies can be created, got '{payload.get('status')}'",
            product_id=payload.get("product_id"),
        )

    values = _column_values(payload)
    values["policy_number"] = policy_number or payload.get("policy_number") or generate_policy_number()
    policy = Policy(**values)
    db.add(policy)
    try:
        await db.flush()
    except IntegrityError as exc:
        logger.error("Policy insert failed", product_id=values.get("product_id"), error=str(exc.orig))
        raise PersistenceError(
            "Policy could not be stored",
            product_id=values.get("product_id"),
            details={"error": str(exc.orig)},
        ) from exc

    logger.info("Policy created", policy_id=str(policy.id), policy_number=policy.policy_number)
    return policy


async def get_policy(db: AsyncSession, policy_id: uuid.UUID) -> Policy | None:
    """Fetch a policy by primary key."""
    return await db.get(Policy, policy_id)


async def list_policies(
    db: AsyncSession,
    *,
    client_id: str | None = None,
    agent_id: str | None = None,
    status: str | None = None,
    offset: int = 0,
    limit: int = 50,
) -> list[Policy]:
    """List policies, newest first, with optional filters."""
    stmt = select(Policy).order_by(Policy.created_at.desc())
    if client_id is not None:
        stmt = stmt.where(Policy.client_id == client_id)
    if agent_id is not None:
        stmt = stmt.where(Policy.agent_id == agent_id)
    if status is not None:
        stmt = stmt.where(Policy.status == status)
    stmt = stmt.offset(offset).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())
