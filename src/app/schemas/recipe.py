"""Recipe request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import Field, PositiveInt, field_validator

from app.schemas.base import NAME_PATTERN, APIRequest, APIResponse, Timestamp
from app.schemas.enums import RecipeType
from app.schemas.ingredient import IngredientResponse


class CreateRecipeRequest(APIRequest):
    """Request body for creating a recipe."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        pattern=NAME_PATTERN,
        description="Recipe name",
    )
    type: RecipeType | None = Field(default=None, description="Dietary type")
    number_of_servings: PositiveInt = Field(..., description="Number of servings")
    instructions: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="Preparation instructions",
    )
    ingredient_ids: list[PositiveInt] | None = Field(
        default=None,
        description="Identifiers of existing ingredients",
    )

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class UpdateRecipeRequest(CreateRecipeRequest):
    """Request body for updating a recipe.

    Omitting ``ingredientIds`` keeps the recipe's current ingredients.
    """

    id: PositiveInt = Field(..., description="Identifier of the recipe to update")


class RecipeResponse(APIResponse):
    """Recipe as returned by the API."""

    id: int
    name: str
    type: RecipeType | None = None
    number_of_servings: int
    instructions: str
    ingredients: list[IngredientResponse] = Field(default_factory=list)
    created_at: Timestamp
    updated_at: Timestamp
