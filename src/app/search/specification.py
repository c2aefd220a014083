"""Composition of criteria into one recipe predicate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from sqlalchemy import and_, or_

from app.observability.logging import get_logger
from app.search.criteria import DataOption
from app.search.filters import build_fragment, find_filter


if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.sql.elements import ColumnElement

    from app.search.criteria import SearchCriteria

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RecipeSpecification:
    """A composed predicate over ``Recipe``.

    ``requires_distinct`` is set when the predicate reads recipe
    ingredients; the query then asks for distinct recipes.
    """

    predicate: ColumnElement[bool]
    requires_distinct: bool = False


class RecipeSpecificationBuilder:
    """Accumulate criteria and fold them into one specification.

    Criteria are combined left to right in insertion order, each with its own
    combinator: AND for ALL (or no option), OR for ANY.
    """

    def __init__(self, criteria: Iterable[SearchCriteria] | None = None) -> None:
        self._criteria: list[SearchCriteria] = list(criteria or [])

    def with_criteria(self, criteria: SearchCriteria) -> Self:
        self._criteria.append(criteria)
        return self

    def build(self) -> RecipeSpecification | None:
        """Return the composed specification, or ``None`` if nothing applies.

        Criteria whose key or operation cannot be resolved are skipped.
        """
        predicate: ColumnElement[bool] | None = None
        requires_distinct = False

        for criteria in self._criteria:
            key = criteria.resolved_key
            strategy = find_filter(criteria.resolved_operation)
            if key is None or strategy is None:
                logger.debug(
                    "Skipping unresolvable criterion",
                    filter_key=criteria.filter_key,
                    operation=criteria.operation,
                )
                continue

            fragment = build_fragment(key, strategy, criteria.value)
            requires_distinct = requires_distinct or key.requires_join

            if predicate is None:
                predicate = fragment
            elif criteria.combinator is DataOption.ANY:
                predicate = or_(predicate, fragment)
            else:
                predicate = and_(predicate, fragment)

        if predicate is None:
            return None
        return RecipeSpecification(predicate, requires_distinct)
