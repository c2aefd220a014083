"""Repositories for data access."""

from app.database.repositories.ingredient import IngredientRepository
from app.database.repositories.recipe import RecipeRepository


__all__ = [
    "IngredientRepository",
    "RecipeRepository",
]
