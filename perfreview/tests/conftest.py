"""
Shared pytest configuration for the performance review test suite.
"""

import pytest

from perfreview.core.observability import set_correlation_id
from perfreview.tests.fixtures import *  # noqa: F401,F403


@pytest.fixture(autouse=True)
def correlation_id():
    """Give every test its own correlation ID for log context."""
    return set_correlation_id()
