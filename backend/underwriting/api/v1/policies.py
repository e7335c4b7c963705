"""
Policy endpoints — evaluate, build and create.

``POST /policies`` re-runs the same rules server-side before the
insert; a client-computed premium is never trusted.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from underwriting.api.deps import configuration_http_error, get_db, get_service
from underwriting.api.schemas.policies import (
    BuildResponse,
    EvaluateRequest,
    EvaluationResponse,
    DraftRequest,
    PolicyCreateRequest,
    PolicyCreatedResponse,
    PolicyResponse,
)
from underwriting.core.logging import get_logger
from underwriting.errors import ConfigurationError, PersistenceError
from underwriting.repositories import policies as policy_repository
from underwriting.service import UnderwritingService
from underwriting.validation.violations import Violation

logger = get_logger(__name__)

router = APIRouter(prefix="/policies", tags=["Policies"])


def _rejected(violations: list[Violation]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={
            "message": "Draft has violations",
            "violations": [v.to_dict() for v in violations],
        },
    )


# ─── Evaluate ─────────────────────────────────────────────
@router.post("/evaluate", response_model=EvaluationResponse)
async def evaluate_draft(
    body: EvaluateRequest,
    service: UnderwritingService = Depends(get_service),
) -> EvaluationResponse:
    """Price and validate a draft; with ``field`` set, only that field is checked."""
    try:
        if body.field:
            evaluation = service.evaluate_field(body.product_id, body.draft, body.field, as_of=body.as_of)
        else:
            evaluation = service.evaluate(body.product_id, body.draft, as_of=body.as_of)
    except ConfigurationError as exc:
        raise configuration_http_error(exc) from exc

    return EvaluationResponse(
        premium=evaluation.premium,
        violations=[v.to_dict() for v in evaluation.violations],
        passed=evaluation.ok,
    )


# ─── Build ────────────────────────────────────────────────
@router.post("/build", response_model=BuildResponse)
async def build_payload(
    body: DraftRequest,
    service: UnderwritingService = Depends(get_service),
) -> BuildResponse:
    """Return the storage payload, or 422 with every violation."""
    try:
        outcome = service.build(body.product_id, body.draft, as_of=body.as_of)
    except ConfigurationError as exc:
        raise configuration_http_error(exc) from exc

    if not outcome.ok:
        raise _rejected(outcome.violations)
    return BuildResponse(payload=outcome.payload)


# ─── Create ───────────────────────────────────────────────
@router.post("", response_model=PolicyCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_policy(
    body: PolicyCreateRequest,
    db: AsyncSession = Depends(get_db),
    service: UnderwritingService = Depends(get_service),
) -> PolicyCreatedResponse:
    """Authoritative re-check, then insert with status ``pending``."""
    try:
        outcome = service.build(body.product_id, body.draft, as_of=date.today())
    except ConfigurationError as exc:
        raise configuration_http_error(exc) from exc

    if not outcome.ok:
        logger.info("Policy rejected at persistence", product_id=body.product_id, violations=len(outcome.violations))
        raise _rejected(outcome.violations)

    try:
        policy = await policy_repository.create_policy(db, outcome.payload)
    except PersistenceError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc

    # Commit happens automatically via get_db dependency
    return PolicyCreatedResponse(
        id=policy.id,
        policy_number=policy.policy_number,
        status=policy.status,
        premium_amount=policy.premium_amount,
    )


# ─── Detail ───────────────────────────────────────────────
@router.get("/{policy_id}", response_model=PolicyResponse)
async def get_policy(policy_id: UUID, db: AsyncSession = Depends(get_db)) -> PolicyResponse:
    """Fetch a stored policy."""
    policy = await policy_repository.get_policy(db, policy_id)
    if policy is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Policy not found")
    return PolicyResponse.model_validate(policy)
