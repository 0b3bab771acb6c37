"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry
from fastapi.testclient import TestClient


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_info() -> MagicMock:
    """Create a mock GraphQL info object with request context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(headers=MagicMock(get=MagicMock(return_value=None)))}
    return info


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client bound to the application, with lifespan events run."""
    from bookshelf.api.app import app

    with TestClient(app) as test_client:
        yield test_client


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]


@pytest.fixture
def expected_books() -> list[dict[str, str]]:
    """The catalog as a GraphQL client sees it."""
    return [
        {"title": "The Awakening", "author": "Kate Chopin"},
        {"title": "City of Glass", "author": "Paul Auster"},
    ]
