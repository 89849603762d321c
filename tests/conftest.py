"""
tests/conftest.py — Shared pytest fixtures for unit and API tests.

Every test gets its own store and app, so creations never leak between tests.
"""
from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from clinic_api.api.main import create_app
from clinic_api.config import DEFAULT_SEED_PATH, Settings
from clinic_api.store.memory import ClinicStore


@pytest.fixture
def settings() -> Settings:
    return Settings(seed_path=DEFAULT_SEED_PATH, environment="development", port=3000)


@pytest.fixture
def store() -> ClinicStore:
    """Fresh store loaded from the packaged seed dataset."""
    return ClinicStore.from_seed(DEFAULT_SEED_PATH)


@pytest.fixture
def client(settings: Settings, store: ClinicStore) -> Iterator[TestClient]:
    with TestClient(create_app(settings=settings, store=store)) as test_client:
        yield test_client
