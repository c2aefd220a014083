"""Shared test fixtures for the Recipe Manager service tests.

Provides test settings, an in-memory SQLite session and helpers to seed
recipes and ingredients.
"""

from __future__ import annotations

import os


os.environ.setdefault("APP_ENV", "test")

from typing import TYPE_CHECKING  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from app.core.config import Settings  # noqa: E402
from app.core.config.settings import (  # noqa: E402
    AuthSettings,
    AuthUserSettings,
    DatabaseSettings,
    LoggingSettings,
)
from app.database import BaseDatabaseModel, Ingredient, Recipe, build_engine  # noqa: E402


if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

    from sqlalchemy.engine import Engine


TEST_SECRET_KEY = "test-secret-key-minimum-32-characters-long"
TEST_USERNAME = "tester"
TEST_PASSWORD = "correct-horse-battery-staple"  # noqa: S105


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated in-memory service with JWT auth."""
    return Settings(
        APP_ENV="test",
        JWT_SECRET_KEY=TEST_SECRET_KEY,
        AUTH_USER_PASSWORD=TEST_PASSWORD,
        auth=AuthSettings(
            mode="local_jwt",
            user=AuthUserSettings(username=TEST_USERNAME, roles=["admin"]),
        ),
        database=DatabaseSettings(url="sqlite://"),
        logging=LoggingSettings(level="WARNING", format="text"),
    )


@pytest.fixture
def engine() -> Generator[Engine]:
    """In-memory SQLite engine with the schema created."""
    engine = build_engine("sqlite://")
    BaseDatabaseModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session]:
    """A session bound to the in-memory engine."""
    with Session(engine, expire_on_commit=False) as session:
        yield session


def add_ingredient(session: Session, name: str) -> Ingredient:
    ingredient = Ingredient(name=name)
    session.add(ingredient)
    session.commit()
    return ingredient


def add_recipe(
    session: Session,
    name: str,
    *,
    recipe_type: str | None = "OTHER",
    servings: int = 2,
    instructions: str = "Mix everything and serve.",
    ingredients: Iterable[Ingredient] = (),
) -> Recipe:
    recipe = Recipe(
        name=name,
        type=recipe_type,
        number_of_servings=servings,
        instructions=instructions,
    )
    recipe.ingredients = list(ingredients)
    session.add(recipe)
    session.commit()
    return recipe
