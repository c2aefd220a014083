"""Ingredient service."""

from app.services.ingredient.exceptions import (
    IngredientAlreadyExistsError,
    IngredientError,
    IngredientInUseError,
    IngredientNotFoundError,
)
from app.services.ingredient.service import IngredientService


__all__ = [
    "IngredientAlreadyExistsError",
    "IngredientError",
    "IngredientInUseError",
    "IngredientNotFoundError",
    "IngredientService",
]
