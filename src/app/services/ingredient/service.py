"""Ingredient CRUD service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from app.database.models import Ingredient
from app.mappers import build_ingredient_response, build_ingredient_responses
from app.observability.logging import get_logger
from app.services.ingredient.exceptions import (
    IngredientAlreadyExistsError,
    IngredientInUseError,
    IngredientNotFoundError,
)


if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.database.repositories import IngredientRepository
    from app.schemas import CreateIngredientRequest, IngredientResponse

logger = get_logger(__name__)


class IngredientService:
    """Create, read, list and delete ingredients."""

    def __init__(self, repository: IngredientRepository) -> None:
        self._repository = repository

    def create_ingredient(self, request: CreateIngredientRequest) -> int:
        """Create an ingredient and return its id.

        Raises:
            IngredientAlreadyExistsError: If the name is already taken.
        """
        if self._repository.find_by_name(request.name) is not None:
            raise IngredientAlreadyExistsError(request.name)

        try:
            ingredient = self._repository.save(Ingredient(name=request.name))
        except IntegrityError as e:
            self._repository.rollback()
            raise IngredientAlreadyExistsError(request.name) from e

        logger.info("Ingredient created", ingredient_id=ingredient.id)
        return ingredient.id

    def find_by_id(self, ingredient_id: int) -> Ingredient:
        ingredient = self._repository.find_by_id(ingredient_id)
        if ingredient is None:
            raise IngredientNotFoundError(ingredient_id)
        return ingredient

    def get_ingredient(self, ingredient_id: int) -> IngredientResponse:
        return build_ingredient_response(self.find_by_id(ingredient_id))

    def get_ingredients_by_ids(self, ingredient_ids: Iterable[int]) -> list[Ingredient]:
        """Resolve every id, failing on the first one that does not exist.

        Raises:
            IngredientNotFoundError: If any id is unknown.
        """
        ids = list(dict.fromkeys(ingredient_ids))
        found = {i.id: i for i in self._repository.find_by_ids(ids)}
        for ingredient_id in ids:
            if ingredient_id not in found:
                raise IngredientNotFoundError(ingredient_id)
        return [found[ingredient_id] for ingredient_id in ids]

    def list_ingredients(self, page: int, size: int) -> list[IngredientResponse]:
        logger.debug("Fetching ingredient list", page=page, size=size)
        return build_ingredient_responses(self._repository.find_page(page, size))

    def delete_ingredient(self, ingredient_id: int) -> None:
        """Delete an ingredient that no recipe references.

        Raises:
            IngredientNotFoundError: If the id is unknown.
            IngredientInUseError: If a recipe still uses the ingredient.
        """
        ingredient = self.find_by_id(ingredient_id)
        if self._repository.is_in_use(ingredient_id):
            raise IngredientInUseError(ingredient_id)

        self._repository.delete(ingredient)
        logger.info("Ingredient deleted", ingredient_id=ingredient_id)
