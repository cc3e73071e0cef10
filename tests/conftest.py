"""Root conftest: shared fixtures for all tests."""

import random
from datetime import date

import pytest

from finbar.libraries.performance.clock import FixedClock
from finbar.services.backend.memory import InMemoryBackend
from finbar.system import LoggerFactory


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before and after each test."""
    LoggerFactory.reset()
    yield
    LoggerFactory.reset()


@pytest.fixture
def today():
    """Pinned 'today' for window arithmetic."""
    return date(2025, 3, 15)


@pytest.fixture
def clock(today):
    return FixedClock(today)


@pytest.fixture
def rng():
    """Seeded random source for reproducible series."""
    return random.Random(42)


@pytest.fixture
def backend():
    """Fresh in-memory backend with nobody signed in."""
    return InMemoryBackend()


@pytest.fixture
def signed_in_backend(backend):
    """In-memory backend with 'Dana' signed up and signed in."""
    backend.sign_up("dana@example.com", "secret1", {"name": "Dana"})
    return backend
