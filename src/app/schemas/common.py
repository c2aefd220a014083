"""Schemas shared by several resources."""

from __future__ import annotations

from pydantic import Field

from app.schemas.base import APIResponse


class CreateEntityResponse(APIResponse):
    """Identifier of a newly created entity."""

    id: int = Field(..., description="Identifier of the created entity")
