"""API schema package."""

from underwriting.api.schemas.directory import ProfileResponse
from underwriting.api.schemas.policies import (
    BuildResponse,
    DraftRequest,
    EvaluateRequest,
    EvaluationResponse,
    PolicyCreateRequest,
    PolicyCreatedResponse,
    PolicyResponse,
    ViolationResponse,
)

__all__ = [
    "BuildResponse",
    "DraftRequest",
    "EvaluateRequest",
    "EvaluationResponse",
    "PolicyCreateRequest",
    "PolicyCreatedResponse",
    "PolicyResponse",
    "ProfileResponse",
    "ViolationResponse",
]
