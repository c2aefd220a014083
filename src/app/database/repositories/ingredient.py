"""Ingredient data access."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import exists, select

from app.database.models import Ingredient, recipe_ingredient


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy.orm import Session


class IngredientRepository:
    """Repository for ``Ingredient`` entities bound to one session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, ingredient: Ingredient) -> Ingredient:
        """Insert or update ``ingredient`` and commit."""
        self._session.add(ingredient)
        self._session.commit()
        return ingredient

    def rollback(self) -> None:
        self._session.rollback()

    def find_by_id(self, ingredient_id: int) -> Ingredient | None:
        return self._session.get(Ingredient, ingredient_id)

    def find_by_ids(self, ingredient_ids: Iterable[int]) -> Sequence[Ingredient]:
        """Return the ingredients among ``ingredient_ids`` that exist."""
        ids = set(ingredient_ids)
        if not ids:
            return []
        stmt = select(Ingredient).where(Ingredient.id.in_(ids)).order_by(Ingredient.id)
        return self._session.scalars(stmt).all()

    def find_by_name(self, name: str) -> Ingredient | None:
        stmt = select(Ingredient).where(Ingredient.name == name)
        return self._session.scalar(stmt)

    def exists_by_id(self, ingredient_id: int) -> bool:
        stmt = select(Ingredient.id).where(Ingredient.id == ingredient_id)
        return self._session.scalar(stmt) is not None

    def is_in_use(self, ingredient_id: int) -> bool:
        """Whether any recipe references the ingredient."""
        stmt = select(
            exists().where(recipe_ingredient.c.ingredient_id == ingredient_id)
        )
        return bool(self._session.scalar(stmt))

    def delete(self, ingredient: Ingredient) -> None:
        self._session.delete(ingredient)
        self._session.commit()

    def find_page(self, page: int, size: int) -> Sequence[Ingredient]:
        stmt = (
            select(Ingredient).order_by(Ingredient.id).offset(page * size).limit(size)
        )
        return self._session.scalars(stmt).all()
