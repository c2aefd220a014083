"""Ingredient request/response schemas."""

from __future__ import annotations

from pydantic import Field, field_validator

from app.schemas.base import NAME_PATTERN, APIRequest, APIResponse, Timestamp


class CreateIngredientRequest(APIRequest):
    """Request body for creating an ingredient."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        pattern=NAME_PATTERN,
        description="Unique ingredient name",
    )

    @field_validator("name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "name must not be blank"
            raise ValueError(msg)
        return value


class IngredientResponse(APIResponse):
    """Ingredient as returned by the API."""

    id: int
    name: str
    created_at: Timestamp
    updated_at: Timestamp
