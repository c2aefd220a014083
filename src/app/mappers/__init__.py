"""Mappers from ORM entities to API response schemas."""

from app.mappers.recipe import (
    build_ingredient_response,
    build_ingredient_responses,
    build_recipe_response,
    build_recipe_responses,
)


__all__ = [
    "build_ingredient_response",
    "build_ingredient_responses",
    "build_recipe_response",
    "build_recipe_responses",
]
