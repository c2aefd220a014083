"""Factories for generating test data."""

from tests.factories.auth import TokenPayloadFactory
from tests.factories.requests import (
    CreateIngredientRequestFactory,
    CreateRecipeRequestFactory,
    SearchCriteriaRequestFactory,
)


__all__ = [
    "CreateIngredientRequestFactory",
    "CreateRecipeRequestFactory",
    "SearchCriteriaRequestFactory",
    "TokenPayloadFactory",
]
