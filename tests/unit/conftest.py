"""Unit test configuration.

Unit tests run against an in-memory SQLite database and need no services.
"""

import pytest


pytestmark = pytest.mark.unit
