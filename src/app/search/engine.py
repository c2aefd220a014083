"""Recipe search engine.

Wires client criteria, the request combinator and pagination into one
repository query.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from app.observability.logging import get_logger
from app.search.exceptions import CriteriaNotFoundError, SearchExecutionError
from app.search.specification import RecipeSpecificationBuilder


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from app.database.models import Recipe
    from app.database.repositories import RecipeRepository
    from app.search.criteria import DataOption, SearchCriteria

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SearchPage(Generic[T]):
    """One page of search results plus the total match count."""

    items: Sequence[T]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return -(-self.total // self.size)


class RecipeSearchEngine:
    """Run criteria searches against a ``RecipeRepository``."""

    def __init__(self, repository: RecipeRepository) -> None:
        self._repository = repository

    def search(
        self,
        criteria: Iterable[SearchCriteria],
        data_option: DataOption | None,
        page: int,
        size: int,
    ) -> SearchPage[Recipe]:
        """Search recipes matching ``criteria`` combined by ``data_option``.

        Raises:
            ValueError: If ``page`` is negative or ``size`` is not positive.
            CriteriaNotFoundError: If no criterion can be applied.
            SearchExecutionError: If the query fails in the store.
        """
        if page < 0:
            msg = f"page must be >= 0, got {page}"
            raise ValueError(msg)
        if size <= 0:
            msg = f"size must be > 0, got {size}"
            raise ValueError(msg)

        builder = RecipeSpecificationBuilder(
            c.with_data_option(data_option) for c in criteria
        )
        specification = builder.build()
        if specification is None:
            raise CriteriaNotFoundError

        try:
            items, total = self._repository.find_all_by_specification(
                specification, page, size
            )
        except SQLAlchemyError as e:
            logger.warning("Search query failed", error_type=type(e).__name__)
            msg = "Search query failed"
            raise SearchExecutionError(msg) from e

        logger.debug(
            "Search completed",
            data_option=data_option,
            page=page,
            size=size,
            total=total,
        )
        return SearchPage(items=items, page=page, size=size, total=total)
