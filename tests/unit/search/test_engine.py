"""Unit tests for RecipeSearchEngine against an in-memory store."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from app.database import RecipeRepository
from app.search import (
    CriteriaNotFoundError,
    DataOption,
    RecipeSearchEngine,
    SearchCriteria,
    SearchExecutionError,
    SearchPage,
)
from tests.conftest import add_ingredient, add_recipe


if TYPE_CHECKING:
    from sqlalchemy.orm import Session


pytestmark = pytest.mark.unit


@pytest.fixture
def search_engine(db_session: Session) -> RecipeSearchEngine:
    return RecipeSearchEngine(RecipeRepository(db_session))


def _names(page: SearchPage) -> list[str]:
    return [recipe.name for recipe in page.items]


class TestSearchScenarios:
    """End-to-end search behaviour."""

    def test_type_equal_returns_matching_recipes_by_name(
        self, db_session: Session, search_engine: RecipeSearchEngine
    ):
        """3 VEGETARIAN and 2 NON_VEGETARIAN recipes: only the 3 come back."""
        for name in ("Risotto", "Caprese", "Omelette"):
            add_recipe(db_session, name, recipe_type="VEGETARIAN")
        for name in ("Burger", "Ribs"):
            add_recipe(db_session, name, recipe_type="NON_VEGETARIAN")

        page = search_engine.search(
            [SearchCriteria("type", "VEGETARIAN", "EQUAL")], DataOption.ALL, 0, 10
        )

        assert _names(page) == ["Caprese", "Omelette", "Risotto"]
        assert page.total == 3

    def test_ingredient_contains_returns_linked_recipe_once(
        self, db_session: Session, search_engine: RecipeSearchEngine
    ):
        pepper = add_ingredient(db_session, "Pepper")
        add_recipe(db_session, "Pepper Steak", ingredients=[pepper])
        add_recipe(db_session, "Plain Rice")

        page = search_engine.search(
            [SearchCriteria("ingredientName", "Pepper", "CONTAINS")], None, 0, 10
        )

        assert _names(page) == ["Pepper Steak"]

    def test_multiple_matching_ingredients_do_not_duplicate(
        self, db_session: Session, search_engine: RecipeSearchEngine
    ):
        red = add_ingredient(db_session, "Red Pepper")
        black = add_ingredient(db_session, "Black Pepper")
        add_recipe(db_session, "Peppered Chicken", ingredients=[red, black])

        page = search_engine.search(
            [SearchCriteria("ingredientName", "pepper", "cn")], DataOption.ALL, 0, 10
        )

        assert _names(page) == ["Peppered Chicken"]
        assert page.total == 1

    def test_name_round_trip_any_case(
        self, db_session: Session, search_engine: RecipeSearchEngine
    ):
        add_recipe(db_session, "PASTA")
        add_recipe(db_session, "Pizza")

        page = search_engine.search(
            [SearchCriteria("name", "Pasta", "eq")], DataOption.ALL, 0, 10
        )

        assert _names(page) == ["PASTA"]

    def test_mixed_valid_and_unknown_operator(
        self, db_session: Session, search_engine: RecipeSearchEngine
    ):
        add_recipe(db_session, "Pasta")
        add_recipe(db_session, "Pizza")

        page = search_engine.search(
            [
                SearchCriteria("name", "piz", "cn"),
                SearchCriteria("name", "Pasta", "approximately"),
            ],
            DataOption.ALL,
            0,
            10,
        )

        assert _names(page) == ["Pizza"]


class TestCombinators:
    """ALL yields the intersection, ANY the union."""

    @pytest.fixture(autouse=True)
    def _seed(self, db_session: Session) -> None:
        add_recipe(db_session, "Bean Chili", recipe_type="VEGAN", servings=4)
        add_recipe(db_session, "Beef Chili", recipe_type="NON_VEGETARIAN", servings=4)
        add_recipe(db_session, "Bean Salad", recipe_type="VEGAN", servings=2)
        add_recipe(db_session, "Fruit Bowl", recipe_type="VEGAN", servings=1)

    @pytest.fixture
    def criteria(self) -> list[SearchCriteria]:
        return [
            SearchCriteria("name", "chili", "cn"),
            SearchCriteria("numberOfServings", 2, "eq"),
        ]

    def test_all(self, search_engine: RecipeSearchEngine, criteria):
        page = search_engine.search(
            [SearchCriteria("name", "bean", "cn"), SearchCriteria("type", "vegan", "eq")],
            DataOption.ALL,
            0,
            10,
        )
        assert _names(page) == ["Bean Chili", "Bean Salad"]

        page = search_engine.search(criteria, DataOption.ALL, 0, 10)
        assert _names(page) == []

    def test_any(self, search_engine: RecipeSearchEngine, criteria):
        page = search_engine.search(criteria, DataOption.ANY, 0, 10)
        assert _names(page) == ["Bean Chili", "Bean Salad", "Beef Chili"]


class TestIngredientCombinations:
    """Ingredient criteria combine per recipe, like any other criterion."""

    @pytest.fixture(autouse=True)
    def _seed(self, db_session: Session) -> None:
        pepper = add_ingredient(db_session, "Pepper")
        salt = add_ingredient(db_session, "Salt")
        add_recipe(db_session, "Steak", ingredients=[pepper, salt])
        add_recipe(db_session, "Peppered Eggs", ingredients=[pepper])
        add_recipe(db_session, "Pasta")

    def test_two_ingredients_with_all_is_intersection(
        self, search_engine: RecipeSearchEngine
    ):
        criteria = [
            SearchCriteria("ingredientName", "pepper", "cn"),
            SearchCriteria("ingredientName", "salt", "cn"),
        ]

        page = search_engine.search(criteria, DataOption.ALL, 0, 10)

        assert _names(page) == ["Steak"]

    def test_two_ingredients_with_any_is_union(self, search_engine: RecipeSearchEngine):
        criteria = [
            SearchCriteria("ingredientName", "salt", "eq"),
            SearchCriteria("ingredientName", "pepper", "eq"),
        ]

        page = search_engine.search(criteria, DataOption.ANY, 0, 10)

        assert _names(page) == ["Peppered Eggs", "Steak"]
        assert page.total == 2

    def test_any_keeps_recipes_without_ingredients(
        self, search_engine: RecipeSearchEngine
    ):
        criteria = [
            SearchCriteria("name", "pasta", "eq"),
            SearchCriteria("ingredientName", "pepper", "cn"),
        ]

        page = search_engine.search(criteria, DataOption.ANY, 0, 10)

        assert _names(page) == ["Pasta", "Peppered Eggs", "Steak"]

    def test_does_not_contain_excludes_any_matching_ingredient(
        self, search_engine: RecipeSearchEngine
    ):
        page = search_engine.search(
            [SearchCriteria("ingredientName", "salt", "nc")], None, 0, 10
        )

        assert _names(page) == ["Pasta", "Peppered Eggs"]

    @pytest.mark.parametrize(("positive", "negative"), [("cn", "nc"), ("eq", "ne")])
    def test_ingredient_operations_partition_recipes(
        self, search_engine: RecipeSearchEngine, positive, negative
    ):
        matches = search_engine.search(
            [SearchCriteria("ingredientName", "salt", positive)], None, 0, 50
        )
        others = search_engine.search(
            [SearchCriteria("ingredientName", "salt", negative)], None, 0, 50
        )

        matched = set(_names(matches))
        rest = set(_names(others))
        assert matched.isdisjoint(rest)
        assert matched | rest == {"Steak", "Peppered Eggs", "Pasta"}


class TestComplementarity:
    """CONTAINS and DOES_NOT_CONTAIN partition the data set."""

    @pytest.mark.parametrize(
        ("key", "value"),
        [("name", "an"), ("type", "veg"), ("instructions", "stir"), ("numberOfServings", 2)],
    )
    def test_partition(
        self, db_session: Session, search_engine: RecipeSearchEngine, key, value
    ):
        add_recipe(
            db_session,
            "Banana Bread",
            recipe_type="VEGETARIAN",
            servings=2,
            instructions="Stir and bake.",
        )
        add_recipe(db_session, "Roast Lamb", recipe_type="NON_VEGETARIAN", servings=6)
        add_recipe(db_session, "Mystery Dish", recipe_type=None, servings=12)

        contains = search_engine.search([SearchCriteria(key, value, "cn")], None, 0, 50)
        excludes = search_engine.search([SearchCriteria(key, value, "nc")], None, 0, 50)

        contains_ids = {r.id for r in contains.items}
        excludes_ids = {r.id for r in excludes.items}
        assert contains_ids.isdisjoint(excludes_ids)
        assert len(contains_ids | excludes_ids) == 3


class TestPagination:
    """Paging over five matches sorted by name."""

    @pytest.fixture(autouse=True)
    def _seed(self, db_session: Session) -> None:
        for name in ("Echo Soup", "Alpha Soup", "Delta Soup", "Bravo Soup", "Charlie Soup"):
            add_recipe(db_session, name)

    def _search(self, engine: RecipeSearchEngine, page: int, size: int) -> SearchPage:
        return engine.search([SearchCriteria("name", "soup", "cn")], None, page, size)

    def test_first_page(self, search_engine: RecipeSearchEngine):
        page = self._search(search_engine, 0, 2)
        assert _names(page) == ["Alpha Soup", "Bravo Soup"]
        assert page.total == 5
        assert page.total_pages == 3

    def test_last_partial_page(self, search_engine: RecipeSearchEngine):
        assert _names(self._search(search_engine, 2, 2)) == ["Echo Soup"]

    def test_page_past_the_end_is_empty(self, search_engine: RecipeSearchEngine):
        assert _names(self._search(search_engine, 5, 2)) == []

    @pytest.mark.parametrize(("page", "size"), [(-1, 10), (0, 0), (0, -5)])
    def test_invalid_arguments(self, search_engine: RecipeSearchEngine, page, size):
        with pytest.raises(ValueError):
            self._search(search_engine, page, size)


class TestFailures:
    """Error signalling."""

    def test_empty_criteria(self, search_engine: RecipeSearchEngine):
        with pytest.raises(CriteriaNotFoundError):
            search_engine.search([], DataOption.ALL, 0, 10)

    def test_all_criteria_dropped(self, search_engine: RecipeSearchEngine):
        with pytest.raises(CriteriaNotFoundError):
            search_engine.search([SearchCriteria("name", "x", "~")], None, 0, 10)

    def test_store_failure_is_wrapped(self):
        repository = Mock(spec=RecipeRepository)
        repository.find_all_by_specification.side_effect = OperationalError(
            "SELECT", {}, Exception("database is locked")
        )
        engine = RecipeSearchEngine(repository)

        with pytest.raises(SearchExecutionError):
            engine.search([SearchCriteria("name", "x", "eq")], None, 0, 10)

        repository.find_all_by_specification.assert_called_once()
