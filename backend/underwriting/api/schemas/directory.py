"""Selection-list schemas for products and profiles."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from underwriting.core.constants import ProfileRole


class ProfileResponse(BaseModel):
    """Agent/client display record."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: str
    email: str
    role: ProfileRole
