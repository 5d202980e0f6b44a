"""Test configuration and fixtures."""

import os

# Salts must exist before Settings is first built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("HASH__PREFIX_SALT", "test-prefix-salt")
os.environ.setdefault("HASH__SUFFIX_SALT", "test-suffix-salt")

from datetime import datetime  # noqa: E402

import logfire  # noqa: E402
import pytest  # noqa: E402

from echofinder.domain.service import TokenHasher  # noqa: E402
from echofinder.util.clock import FixedClock  # noqa: E402
from tests.di.clock import TEST_NOW  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def now() -> datetime:
    """Instant the test container's clock is frozen at."""
    return TEST_NOW


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TEST_NOW)


@pytest.fixture
def token_hasher() -> TokenHasher:
    return TokenHasher(prefix_salt="test-prefix-salt", suffix_salt="test-suffix-salt")
