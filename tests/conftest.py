"""Pytest configuration.

Environment variables are set before anything under ``src`` is imported,
because settings are loaded once at import time.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-bytes-long")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import inspect  # noqa: E402

import pytest  # noqa: E402

from src.domain.value_objects import PermissionVocabulary  # noqa: E402
from src.infrastructure.security import JWTService  # noqa: E402
from tests.utils.fakes import (  # noqa: E402
    InMemoryPermissionRepository,
    InMemoryUserRepository,
)

TEST_SECRET = os.environ["SECRET_KEY"]

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture
def vocabulary() -> PermissionVocabulary:
    """Built-in permission vocabulary."""
    return PermissionVocabulary.default()


@pytest.fixture
def token_service() -> JWTService:
    """JWT service signing with the test secret."""
    return JWTService(secret_key=TEST_SECRET, expiration_minutes=60)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def permission_repo() -> InMemoryPermissionRepository:
    return InMemoryPermissionRepository()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests against the FastAPI app")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
