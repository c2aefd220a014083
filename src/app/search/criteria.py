"""Search criterion model.

A criterion is the raw ``(filterKey, value, operation)`` triple sent by a
client plus the request-level combinator. Keys and operations are kept as
received and resolved lazily, so unresolvable input can be dropped by the
specification builder instead of failing the whole request.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any, Self


class FilterKey(StrEnum):
    """Recipe attributes a criterion can target."""

    NAME = "name"
    NUMBER_OF_SERVINGS = "numberOfServings"
    TYPE = "type"
    INSTRUCTIONS = "instructions"
    INGREDIENT_NAME = "ingredientName"

    @classmethod
    def from_value(cls, value: str | None) -> Self | None:
        """Resolve ``value`` case-insensitively; ``ingredient`` is an alias."""
        if value is None:
            return None
        lookup = str(value).strip().lower()
        if lookup == "ingredient":
            return cls.INGREDIENT_NAME
        for member in cls:
            if member.value.lower() == lookup:
                return member
        return None

    @property
    def requires_join(self) -> bool:
        return self is FilterKey.INGREDIENT_NAME


class SearchOperation(StrEnum):
    """Comparison operators with their short wire codes."""

    EQUAL = "eq"
    NOT_EQUAL = "ne"
    CONTAINS = "cn"
    DOES_NOT_CONTAIN = "nc"

    @classmethod
    def from_value(cls, value: str | None) -> Self | None:
        """Resolve by name (``CONTAINS``) or code (``cn``), ignoring case.

        Returns ``None`` for anything else.
        """
        if value is None:
            return None
        lookup = str(value).strip().lower()
        for member in cls:
            if lookup in (member.value, member.name.lower()):
                return member
        return None


class DataOption(StrEnum):
    """How criteria of one request combine: ALL is AND, ANY is OR."""

    ALL = "all"
    ANY = "any"

    @classmethod
    def from_value(cls, value: str | None) -> Self | None:
        if value is None:
            return None
        lookup = str(value).strip().lower()
        for member in cls:
            if member.value == lookup:
                return member
        return None


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """One client-supplied criterion."""

    filter_key: str
    value: Any
    operation: str
    data_option: DataOption | None = None

    @property
    def resolved_key(self) -> FilterKey | None:
        return FilterKey.from_value(self.filter_key)

    @property
    def resolved_operation(self) -> SearchOperation | None:
        return SearchOperation.from_value(self.operation)

    @property
    def combinator(self) -> DataOption:
        """The effective combinator; an absent option means ALL."""
        return DataOption.from_value(self.data_option) or DataOption.ALL

    def with_data_option(self, data_option: DataOption | None) -> SearchCriteria:
        return replace(self, data_option=data_option)
