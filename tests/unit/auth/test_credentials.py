"""Unit tests for the password grant credential check."""

from __future__ import annotations

import pytest

from app.auth.credentials import authenticate_user
from app.core.config import Settings
from tests.conftest import TEST_PASSWORD, TEST_USERNAME


pytestmark = pytest.mark.unit


class TestAuthenticateUser:
    """Tests for authenticate_user."""

    def test_valid_credentials_return_roles(self, test_settings: Settings):
        assert authenticate_user(TEST_USERNAME, TEST_PASSWORD, test_settings) == ["admin"]

    @pytest.mark.parametrize(
        ("username", "password"),
        [(TEST_USERNAME, "wrong"), ("someone", TEST_PASSWORD), ("", "")],
    )
    def test_invalid_credentials(self, test_settings: Settings, username, password):
        assert authenticate_user(username, password, test_settings) is None

    def test_rejects_everything_without_configured_password(self, test_settings: Settings):
        settings = test_settings.model_copy(update={"AUTH_USER_PASSWORD": ""})
        assert authenticate_user(TEST_USERNAME, "", settings) is None
