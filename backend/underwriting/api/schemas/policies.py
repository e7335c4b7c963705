"""Policy evaluation/build/create request and response schemas."""

from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DraftRequest(BaseModel):
    """A product reference plus raw draft fields as the intake form holds them."""

    product_id: str = Field(..., min_length=1, max_length=64)
    draft: dict[str, Any] = Field(default_factory=dict)
    as_of: date | None = None


class EvaluateRequest(DraftRequest):
    """Full evaluation, or a single-field run when ``field`` is set."""

    field: str | None = None


class ViolationResponse(BaseModel):
    field: str
    rule: str
    message: str


class EvaluationResponse(BaseModel):
    premium: float | None
    violations: list[ViolationResponse]
    passed: bool


class BuildResponse(BaseModel):
    payload: dict[str, Any]


class PolicyCreateRequest(BaseModel):
    """Persisting always evaluates against today's date."""

    product_id: str = Field(..., min_length=1, max_length=64)
    draft: dict[str, Any] = Field(default_factory=dict)


class PolicyCreatedResponse(BaseModel):
    id: UUID
    policy_number: str
    status: str
    premium_amount: float


class PolicyResponse(BaseModel):
    """Stored policy summary."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    policy_number: str
    product_id: str
    client_id: str
    agent_id: str
    status: str
    premium_amount: float
    start_date: date
    end_date: date | None
