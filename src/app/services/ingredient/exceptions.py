"""Ingredient service exceptions."""

from __future__ import annotations


class IngredientError(Exception):
    """Base exception for ingredient service errors."""


class IngredientNotFoundError(IngredientError):
    """Raised when an ingredient id does not resolve."""

    def __init__(self, ingredient_id: int) -> None:
        self.ingredient_id = ingredient_id
        super().__init__("Ingredient not found")


class IngredientAlreadyExistsError(IngredientError):
    """Raised when creating an ingredient whose name is taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Ingredient already exists: {name}")


class IngredientInUseError(IngredientError):
    """Raised when deleting an ingredient still linked to recipes."""

    def __init__(self, ingredient_id: int) -> None:
        self.ingredient_id = ingredient_id
        super().__init__("Ingredient is used by one or more recipes")
