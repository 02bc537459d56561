"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookshelf.api.app import create_app
from bookshelf.config import IdPolicy, Settings
from bookshelf.store import BookStore


@pytest.fixture
def store() -> BookStore:
    """A fresh store holding only the seed books."""
    return BookStore.seeded()


@pytest.fixture
def legacy_store() -> BookStore:
    """A seeded store that assigns ids from the collection size."""
    return BookStore.seeded(id_policy=IdPolicy.LENGTH)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, debug=False, graphiql=False)


@pytest.fixture
def app(test_settings: Settings, store: BookStore) -> FastAPI:
    return create_app(test_settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
