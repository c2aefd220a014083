"""Relational persistence layer.

This module provides:
- SQLAlchemy ORM models for recipes and ingredients
- Engine and per-request session management
- Repository classes for data access
"""

from app.database.connection import (
    build_engine,
    check_database_health,
    create_tables,
    dispose_engine,
    get_db,
    get_engine,
    init_engine,
)
from app.database.models import BaseDatabaseModel, Ingredient, Recipe
from app.database.repositories import IngredientRepository, RecipeRepository


__all__ = [
    "BaseDatabaseModel",
    "Ingredient",
    "IngredientRepository",
    "Recipe",
    "RecipeRepository",
    "build_engine",
    "check_database_health",
    "create_tables",
    "dispose_engine",
    "get_db",
    "get_engine",
    "init_engine",
]
