"""Enumeration types used across the API schemas."""

from __future__ import annotations

from enum import StrEnum


class RecipeType(StrEnum):
    """Dietary classification of a recipe."""

    VEGETARIAN = "VEGETARIAN"
    NON_VEGETARIAN = "NON_VEGETARIAN"
    VEGAN = "VEGAN"
    OTHER = "OTHER"


class HealthStatus(StrEnum):
    """Health status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
