"""Recipe data access."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, select

from app.database.models import Recipe
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.orm import Session

    from app.search.specification import RecipeSpecification

logger = get_logger(__name__)


class RecipeRepository:
    """Repository for ``Recipe`` entities bound to one session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, recipe: Recipe) -> Recipe:
        """Insert or update ``recipe`` and commit."""
        self._session.add(recipe)
        self._session.commit()
        return recipe

    def find_by_id(self, recipe_id: int) -> Recipe | None:
        return self._session.get(Recipe, recipe_id)

    def exists_by_id(self, recipe_id: int) -> bool:
        stmt = select(Recipe.id).where(Recipe.id == recipe_id)
        return self._session.scalar(stmt) is not None

    def delete(self, recipe: Recipe) -> None:
        self._session.delete(recipe)
        self._session.commit()

    def find_page(self, page: int, size: int) -> Sequence[Recipe]:
        """Return one page of recipes in insertion order."""
        stmt = select(Recipe).order_by(Recipe.id).offset(page * size).limit(size)
        return self._session.scalars(stmt).all()

    def find_all_by_specification(
        self,
        specification: RecipeSpecification,
        page: int,
        size: int,
    ) -> tuple[Sequence[Recipe], int]:
        """Run a search specification and return ``(items, total)``.

        Ingredient criteria arrive as EXISTS subqueries inside the predicate;
        the query is de-duplicated when the specification asks for it.
        Results are ordered by name, then id.
        """
        stmt = select(Recipe).where(specification.predicate)
        if specification.requires_distinct:
            stmt = stmt.distinct()

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = self._session.scalar(count_stmt) or 0

        page_stmt = (
            stmt.order_by(Recipe.name.asc(), Recipe.id.asc())
            .offset(page * size)
            .limit(size)
        )
        items = self._session.scalars(page_stmt).all()

        logger.debug(
            "Specification query executed",
            total=total,
            returned=len(items),
            distinct=specification.requires_distinct,
        )
        return items, total
