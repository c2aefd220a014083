"""Recipe and ingredient mappers.

Functions transforming ORM entities into API response schemas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.schemas import IngredientResponse, RecipeResponse


if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.database.models import Ingredient, Recipe


def build_ingredient_response(ingredient: Ingredient) -> IngredientResponse:
    return IngredientResponse.model_validate(ingredient)


def build_recipe_response(recipe: Recipe) -> RecipeResponse:
    """Build the API view of a recipe including its ingredients."""
    return RecipeResponse(
        id=recipe.id,
        name=recipe.name,
        type=recipe.type,
        number_of_servings=recipe.number_of_servings,
        instructions=recipe.instructions,
        ingredients=[build_ingredient_response(i) for i in recipe.ingredients],
        created_at=recipe.created_at,
        updated_at=recipe.updated_at,
    )


def build_recipe_responses(recipes: Iterable[Recipe]) -> list[RecipeResponse]:
    return [build_recipe_response(recipe) for recipe in recipes]


def build_ingredient_responses(
    ingredients: Iterable[Ingredient],
) -> list[IngredientResponse]:
    return [build_ingredient_response(ingredient) for ingredient in ingredients]
