"""Recipe search request schemas.

Filter keys, operations and the data option are accepted case-insensitively
and rejected with 422 when unknown.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from app.schemas.base import APIRequest
from app.search.criteria import DataOption, FilterKey, SearchCriteria, SearchOperation


class SearchCriteriaRequest(APIRequest):
    """One ``(filterKey, value, operation)`` criterion."""

    filter_key: FilterKey = Field(..., description="Recipe attribute to filter on")
    value: str | int | float = Field(..., description="Value to compare against")
    operation: SearchOperation = Field(
        ...,
        description="eq, ne, cn, nc (or EQUAL, NOT_EQUAL, CONTAINS, DOES_NOT_CONTAIN)",
    )

    @field_validator("filter_key", mode="before")
    @classmethod
    def _resolve_filter_key(cls, value: Any) -> Any:
        if isinstance(value, str):
            return FilterKey.from_value(value) or value
        return value

    @field_validator("operation", mode="before")
    @classmethod
    def _resolve_operation(cls, value: Any) -> Any:
        if isinstance(value, str):
            return SearchOperation.from_value(value) or value
        return value

    def to_criteria(self) -> SearchCriteria:
        return SearchCriteria(
            filter_key=str(self.filter_key),
            value=self.value,
            operation=str(self.operation),
        )


class RecipeSearchRequest(APIRequest):
    """Search body: criteria combined by ``dataOption`` (``all`` by default)."""

    criteria: list[SearchCriteriaRequest] = Field(default_factory=list)
    data_option: DataOption | None = Field(default=None, description="all or any")

    @field_validator("data_option", mode="before")
    @classmethod
    def _resolve_data_option(cls, value: Any) -> Any:
        if isinstance(value, str):
            return DataOption.from_value(value) or value
        return value

    def to_criteria(self) -> list[SearchCriteria]:
        return [criterion.to_criteria() for criterion in self.criteria]
