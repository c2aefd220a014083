"""Pydantic schemas for request/response validation."""

from app.schemas.auth import TokenResponse
from app.schemas.base import APIRequest, APIResponse
from app.schemas.common import CreateEntityResponse
from app.schemas.enums import HealthStatus, RecipeType
from app.schemas.health import HealthResponse
from app.schemas.ingredient import CreateIngredientRequest, IngredientResponse
from app.schemas.recipe import (
    CreateRecipeRequest,
    RecipeResponse,
    UpdateRecipeRequest,
)
from app.schemas.search import RecipeSearchRequest, SearchCriteriaRequest


__all__ = [
    "APIRequest",
    "APIResponse",
    "CreateEntityResponse",
    "CreateIngredientRequest",
    "CreateRecipeRequest",
    "HealthResponse",
    "HealthStatus",
    "IngredientResponse",
    "RecipeResponse",
    "RecipeSearchRequest",
    "RecipeType",
    "SearchCriteriaRequest",
    "TokenResponse",
    "UpdateRecipeRequest",
]
