"""FastAPI dependencies for service access.

Services are built per request on top of the request's database session.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.auth.dependencies import get_request_settings
from app.core.config import Settings
from app.database import IngredientRepository, RecipeRepository, get_db
from app.services.ingredient import IngredientService
from app.services.recipe import RecipeService


DbSession = Annotated[Session, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_request_settings)]


def get_ingredient_service(db: DbSession) -> IngredientService:
    return IngredientService(IngredientRepository(db))


def get_recipe_service(
    db: DbSession,
    ingredient_service: Annotated[IngredientService, Depends(get_ingredient_service)],
) -> RecipeService:
    return RecipeService(RecipeRepository(db), ingredient_service)


def cap_page_size(size: int, settings: Settings) -> int:
    """Clamp a requested page size to ``api.max_page_size``."""
    return min(size, settings.api.max_page_size)
