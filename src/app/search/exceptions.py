"""Search engine exceptions."""

from __future__ import annotations


class SearchError(Exception):
    """Base exception for recipe search errors."""


class CriteriaNotFoundError(SearchError):
    """Raised when a search request yields no usable criterion.

    Covers both an empty criteria list and a list where every criterion has
    an unresolvable filter key or operation.
    """

    def __init__(self, message: str = "Criteria not found") -> None:
        super().__init__(message)


class SearchExecutionError(SearchError):
    """Raised when the store fails while running a search query."""
