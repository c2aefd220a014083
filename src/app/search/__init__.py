"""Dynamic recipe search.

This package provides:
- The criterion model (filter keys, operations, combinators)
- Filter strategies producing SQL predicate fragments
- A builder folding criteria into a single specification
- The search engine running specifications with pagination
"""

from app.search.criteria import DataOption, FilterKey, SearchCriteria, SearchOperation
from app.search.engine import RecipeSearchEngine, SearchPage
from app.search.exceptions import (
    CriteriaNotFoundError,
    SearchError,
    SearchExecutionError,
)
from app.search.filters import FILTER_STRATEGIES, SearchFilter, find_filter
from app.search.specification import RecipeSpecification, RecipeSpecificationBuilder


__all__ = [
    "FILTER_STRATEGIES",
    "CriteriaNotFoundError",
    "DataOption",
    "FilterKey",
    "RecipeSearchEngine",
    "RecipeSpecification",
    "RecipeSpecificationBuilder",
    "SearchCriteria",
    "SearchError",
    "SearchExecutionError",
    "SearchFilter",
    "SearchOperation",
    "SearchPage",
    "find_filter",
]
