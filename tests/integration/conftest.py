"""Integration test conftest.

Inherits the root conftest.py db_session fixture (a fresh in-memory SQLite
database per test) and marks every test in this directory as integration.
"""

import pytest


@pytest.fixture(autouse=True)
def _mark_integration(request):
    """Auto-mark all tests in this directory as integration."""
    request.node.add_marker(pytest.mark.integration)
