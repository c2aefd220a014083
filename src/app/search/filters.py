"""Filter strategies turning one criterion into a SQL predicate fragment.

Strategies are pure: given a target expression and a value they return a
boolean column expression and touch nothing else. The dispatch table is
module-level and read-only, so it is shared safely between requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from sqlalchemy import String, cast, func, not_

from app.database.models import Ingredient, Recipe
from app.search.criteria import FilterKey, SearchOperation


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from sqlalchemy.sql.elements import ColumnElement


LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so ``value`` is matched literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def normalize_value(value: Any) -> str:
    """Compare every value by its lowercase string form."""
    return str(value).lower()


def _equal(target: ColumnElement[str], value: str) -> ColumnElement[bool]:
    return target == value


def _not_equal(target: ColumnElement[str], value: str) -> ColumnElement[bool]:
    return target != value


def _contains(target: ColumnElement[str], value: str) -> ColumnElement[bool]:
    return target.like(f"%{escape_like(value)}%", escape=LIKE_ESCAPE)


def _does_not_contain(target: ColumnElement[str], value: str) -> ColumnElement[bool]:
    return target.not_like(f"%{escape_like(value)}%", escape=LIKE_ESCAPE)


@dataclass(frozen=True, slots=True)
class SearchFilter:
    """A predicate builder for one ``SearchOperation``."""

    operation: SearchOperation
    builder: Callable[[ColumnElement[str], str], ColumnElement[bool]]

    def could_be_applied(self, operation: SearchOperation | None) -> bool:
        return operation is self.operation

    def apply(self, target: ColumnElement[str], value: Any) -> ColumnElement[bool]:
        return self.builder(target, normalize_value(value))


FILTER_STRATEGIES: Mapping[SearchOperation, SearchFilter] = MappingProxyType(
    {
        SearchOperation.EQUAL: SearchFilter(SearchOperation.EQUAL, _equal),
        SearchOperation.NOT_EQUAL: SearchFilter(SearchOperation.NOT_EQUAL, _not_equal),
        SearchOperation.CONTAINS: SearchFilter(SearchOperation.CONTAINS, _contains),
        SearchOperation.DOES_NOT_CONTAIN: SearchFilter(
            SearchOperation.DOES_NOT_CONTAIN, _does_not_contain
        ),
    }
)

# Negative operations on ingredients negate the EXISTS of their positive form
_POSITIVE_OPERATIONS = MappingProxyType(
    {
        SearchOperation.NOT_EQUAL: SearchOperation.EQUAL,
        SearchOperation.DOES_NOT_CONTAIN: SearchOperation.CONTAINS,
    }
)

_RECIPE_COLUMNS = MappingProxyType(
    {
        FilterKey.NAME: Recipe.name,
        FilterKey.NUMBER_OF_SERVINGS: Recipe.number_of_servings,
        FilterKey.TYPE: Recipe.type,
        FilterKey.INSTRUCTIONS: Recipe.instructions,
    }
)


def find_filter(operation: SearchOperation | None) -> SearchFilter | None:
    """Return the first strategy applicable to ``operation``, if any."""
    for strategy in FILTER_STRATEGIES.values():
        if strategy.could_be_applied(operation):
            return strategy
    return None


def resolve_target(key: FilterKey) -> ColumnElement[str]:
    """Build the lowercase string expression a criterion compares against.

    Recipe columns are coalesced to ``""`` so NULLs take part in CONTAINS and
    DOES_NOT_CONTAIN. The ingredient name is only meaningful inside the
    EXISTS built by ``build_fragment``.
    """
    if key.requires_join:
        return func.lower(cast(Ingredient.name, String))
    column = _RECIPE_COLUMNS[key]
    return func.lower(func.coalesce(cast(column, String), ""))


def build_fragment(
    key: FilterKey,
    strategy: SearchFilter,
    value: Any,
) -> ColumnElement[bool]:
    """Build the predicate fragment for one resolved criterion.

    Recipe columns are compared directly. Each ingredient criterion becomes
    its own correlated EXISTS over the recipe's ingredients, so several of
    them combine per recipe rather than per ingredient row, and recipes
    without ingredients still take part in ANY. NOT_EQUAL and
    DOES_NOT_CONTAIN match recipes where no ingredient satisfies the
    positive form.
    """
    if not key.requires_join:
        return strategy.apply(resolve_target(key), value)

    positive = FILTER_STRATEGIES[
        _POSITIVE_OPERATIONS.get(strategy.operation, strategy.operation)
    ]
    matched = Recipe.ingredients.any(positive.apply(resolve_target(key), value))
    return matched if positive is strategy else not_(matched)
