"""Recipe service."""

from app.services.recipe.exceptions import RecipeError, RecipeNotFoundError
from app.services.recipe.service import RecipeService


__all__ = [
    "RecipeError",
    "RecipeNotFoundError",
    "RecipeService",
]
