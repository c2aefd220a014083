"""Recipe CRUD and search service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.database.models import Recipe
from app.mappers import build_recipe_response, build_recipe_responses
from app.observability.logging import get_logger
from app.search import RecipeSearchEngine
from app.services.recipe.exceptions import RecipeNotFoundError


if TYPE_CHECKING:
    from app.database.repositories import RecipeRepository
    from app.schemas import (
        CreateRecipeRequest,
        RecipeResponse,
        RecipeSearchRequest,
        UpdateRecipeRequest,
    )
    from app.services.ingredient import IngredientService

logger = get_logger(__name__)


class RecipeService:
    """Recipe operations on top of the recipe repository and search engine."""

    def __init__(
        self,
        repository: RecipeRepository,
        ingredient_service: IngredientService,
        search_engine: RecipeSearchEngine | None = None,
    ) -> None:
        self._repository = repository
        self._ingredient_service = ingredient_service
        self._search_engine = search_engine or RecipeSearchEngine(repository)

    def create_recipe(self, request: CreateRecipeRequest) -> int:
        """Create a recipe and return its id.

        Raises:
            IngredientNotFoundError: If any ingredient id is unknown.
        """
        logger.info("Creating recipe", name=request.name)

        recipe = Recipe(
            name=request.name,
            type=request.type,
            number_of_servings=request.number_of_servings,
            instructions=request.instructions,
        )
        if request.ingredient_ids is not None:
            recipe.ingredients = self._ingredient_service.get_ingredients_by_ids(
                request.ingredient_ids
            )

        recipe = self._repository.save(recipe)
        logger.info("Recipe created", recipe_id=recipe.id)
        return recipe.id

    def find_by_id(self, recipe_id: int) -> Recipe:
        recipe = self._repository.find_by_id(recipe_id)
        if recipe is None:
            logger.warning("Recipe not found", recipe_id=recipe_id)
            raise RecipeNotFoundError(recipe_id)
        return recipe

    def get_recipe(self, recipe_id: int) -> RecipeResponse:
        return build_recipe_response(self.find_by_id(recipe_id))

    def list_recipes(self, page: int, size: int) -> list[RecipeResponse]:
        logger.debug("Fetching recipe list", page=page, size=size)
        return build_recipe_responses(self._repository.find_page(page, size))

    def update_recipe(self, request: UpdateRecipeRequest) -> None:
        """Overwrite a recipe's fields.

        The ingredient set is replaced only when ``ingredient_ids`` is given.

        Raises:
            RecipeNotFoundError: If the recipe id is unknown.
            IngredientNotFoundError: If any ingredient id is unknown.
        """
        logger.info("Updating recipe", recipe_id=request.id)
        recipe = self.find_by_id(request.id)

        recipe.name = request.name
        recipe.type = request.type
        recipe.number_of_servings = request.number_of_servings
        recipe.instructions = request.instructions
        if request.ingredient_ids is not None:
            recipe.ingredients = self._ingredient_service.get_ingredients_by_ids(
                request.ingredient_ids
            )

        self._repository.save(recipe)
        logger.info("Recipe updated", recipe_id=request.id)

    def delete_recipe(self, recipe_id: int) -> None:
        """Delete a recipe.

        Raises:
            RecipeNotFoundError: If the recipe id is unknown.
        """
        logger.info("Deleting recipe", recipe_id=recipe_id)
        recipe = self.find_by_id(recipe_id)
        self._repository.delete(recipe)
        logger.info("Recipe deleted", recipe_id=recipe_id)

    def search_recipes(
        self,
        request: RecipeSearchRequest,
        page: int,
        size: int,
    ) -> list[RecipeResponse]:
        """Search recipes, sorted by name.

        Raises:
            CriteriaNotFoundError: If no criterion can be applied.
            SearchExecutionError: If the query fails in the store.
        """
        logger.info(
            "Searching recipes",
            criteria_count=len(request.criteria),
            page=page,
            size=size,
        )
        result = self._search_engine.search(
            request.to_criteria(),
            request.data_option,
            page,
            size,
        )
        logger.info("Search completed", total=result.total)
        return build_recipe_responses(result.items)
