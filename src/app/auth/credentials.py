"""Password grant credential check against the configured service user.

Password storage and hashing are out of scope: the single accepted user is
configured under ``auth.user`` with the password in ``AUTH_USER_PASSWORD``.
"""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING

from app.observability.logging import get_logger


if TYPE_CHECKING:
    from app.core.config import Settings

logger = get_logger(__name__)


def authenticate_user(username: str, password: str, settings: Settings) -> list[str] | None:
    """Return the user's roles when the credentials match, else ``None``."""
    expected_password = settings.AUTH_USER_PASSWORD
    if not expected_password:
        logger.warning("Password grant rejected: AUTH_USER_PASSWORD is not set")
        return None

    user = settings.auth.user
    username_ok = secrets.compare_digest(username.encode(), user.username.encode())
    password_ok = secrets.compare_digest(password.encode(), expected_password.encode())
    if not (username_ok and password_ok):
        logger.info("Password grant rejected", username=username)
        return None
    return list(user.roles)
