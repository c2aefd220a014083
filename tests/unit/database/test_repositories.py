"""Unit tests for the recipe and ingredient repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from app.database import IngredientRepository, RecipeRepository
from app.search.criteria import SearchCriteria
from app.search.specification import RecipeSpecificationBuilder
from tests.conftest import add_ingredient, add_recipe


if TYPE_CHECKING:
    from sqlalchemy.orm import Session


pytestmark = pytest.mark.unit


def _spec(*criteria: SearchCriteria):
    specification = RecipeSpecificationBuilder(criteria).build()
    assert specification is not None
    return specification


class TestRecipeRepository:
    """Tests for RecipeRepository."""

    def test_find_page_orders_by_id(self, db_session: Session):
        for name in ("Zucchini Bake", "Apple Pie", "Miso Soup"):
            add_recipe(db_session, name)
        repository = RecipeRepository(db_session)

        first = repository.find_page(0, 2)
        second = repository.find_page(1, 2)

        assert [r.name for r in first] == ["Zucchini Bake", "Apple Pie"]
        assert [r.name for r in second] == ["Miso Soup"]

    def test_exists_and_delete(self, db_session: Session):
        recipe = add_recipe(db_session, "Toast")
        repository = RecipeRepository(db_session)

        assert repository.exists_by_id(recipe.id)
        repository.delete(recipe)
        assert not repository.exists_by_id(recipe.id)
        assert repository.find_by_id(recipe.id) is None

    def test_specification_results_are_ordered_by_name(self, db_session: Session):
        add_recipe(db_session, "Soup", recipe_type="VEGAN")
        add_recipe(db_session, "Bread", recipe_type="VEGAN")
        add_recipe(db_session, "Steak", recipe_type="OTHER")
        repository = RecipeRepository(db_session)

        items, total = repository.find_all_by_specification(
            _spec(SearchCriteria("type", "vegan", "eq")), 0, 10
        )

        assert total == 2
        assert [r.name for r in items] == ["Bread", "Soup"]

    def test_ingredient_matches_are_not_duplicated(self, db_session: Session):
        salt = add_ingredient(db_session, "Salt")
        sea_salt = add_ingredient(db_session, "Sea Salt")
        add_recipe(db_session, "Chips", ingredients=[salt, sea_salt])
        repository = RecipeRepository(db_session)

        items, total = repository.find_all_by_specification(
            _spec(SearchCriteria("ingredientName", "salt", "cn")), 0, 10
        )

        assert total == 1
        assert [r.name for r in items] == ["Chips"]
        assert {i.name for i in items[0].ingredients} == {"Salt", "Sea Salt"}

    def test_total_counts_beyond_page(self, db_session: Session):
        for index in range(5):
            add_recipe(db_session, f"Dish {index}", servings=4)
        repository = RecipeRepository(db_session)

        items, total = repository.find_all_by_specification(
            _spec(SearchCriteria("numberOfServings", 4, "eq")), 2, 2
        )

        assert total == 5
        assert [r.name for r in items] == ["Dish 4"]


class TestIngredientRepository:
    """Tests for IngredientRepository."""

    def test_find_by_ids_ignores_missing(self, db_session: Session):
        salt = add_ingredient(db_session, "Salt")
        pepper = add_ingredient(db_session, "Pepper")
        repository = IngredientRepository(db_session)

        found = repository.find_by_ids([pepper.id, salt.id, 999])

        assert [i.name for i in found] == ["Salt", "Pepper"]
        assert repository.find_by_ids([]) == []

    def test_find_by_name(self, db_session: Session):
        add_ingredient(db_session, "Basil")
        repository = IngredientRepository(db_session)

        assert repository.find_by_name("Basil") is not None
        assert repository.find_by_name("basil") is None

    def test_is_in_use(self, db_session: Session):
        salt = add_ingredient(db_session, "Salt")
        thyme = add_ingredient(db_session, "Thyme")
        add_recipe(db_session, "Chips", ingredients=[salt])
        repository = IngredientRepository(db_session)

        assert repository.is_in_use(salt.id)
        assert not repository.is_in_use(thyme.id)

    def test_deleting_recipe_releases_ingredient(self, db_session: Session):
        salt = add_ingredient(db_session, "Salt")
        recipe = add_recipe(db_session, "Chips", ingredients=[salt])
        repository = IngredientRepository(db_session)

        RecipeRepository(db_session).delete(recipe)

        assert not repository.is_in_use(salt.id)
        repository.delete(salt)
        assert not repository.exists_by_id(salt.id)
