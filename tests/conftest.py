"""Shared fixtures: an isolated registry per test and an API client on top of it."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from rental_registry_api.app.core.state import RentalRegistry
from rental_registry_api.app.main import create_app


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    return str(tmp_path / "registry.db")


@pytest.fixture
def registry(db_path: str) -> RentalRegistry:
    return RentalRegistry.open(db_path)


@pytest.fixture
def client(registry: RentalRegistry) -> TestClient:
    return TestClient(create_app(registry))
