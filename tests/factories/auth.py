"""Auth-related factories.

Uses polyfactory for consistent test data generation.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from polyfactory.factories.pydantic_factory import ModelFactory

from app.auth.jwt import TokenPayload
from app.auth.permissions import Role


class TokenPayloadFactory(ModelFactory[TokenPayload]):
    """Factory for generating TokenPayload instances."""

    __model__ = TokenPayload

    type = "access"
    permissions = []  # noqa: RUF012

    @classmethod
    def sub(cls) -> str:
        return f"user-{cls.__faker__.user_name()}"

    @classmethod
    def exp(cls) -> datetime:
        return datetime.now(UTC) + timedelta(minutes=30)

    @classmethod
    def iat(cls) -> datetime:
        return datetime.now(UTC)

    @classmethod
    def roles(cls) -> list[str]:
        return [str(Role.USER)]
