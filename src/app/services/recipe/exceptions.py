"""Recipe service exceptions."""

from __future__ import annotations


class RecipeError(Exception):
    """Base exception for recipe service errors."""


class RecipeNotFoundError(RecipeError):
    """Raised when a recipe id does not resolve."""

    def __init__(self, recipe_id: int) -> None:
        self.recipe_id = recipe_id
        super().__init__("Recipe not found")
