"""Shared fixtures: a fresh seeded store and app per test."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from wanderlust.core.config import settings
from wanderlust.core.rate_limiting import limiter
from wanderlust.db.repositories import Repository
from wanderlust.db.store import MemoryStore
from wanderlust.main import create_app


@pytest.fixture(autouse=True)
def no_rate_limits():
    limiter.enabled = False
    limiter.reset()
    yield
    limiter.enabled = settings.rate_limit_enabled
    limiter.reset()


@pytest.fixture
def store() -> MemoryStore:
    s = MemoryStore()
    s.seed()
    return s


@pytest.fixture
def repo(store: MemoryStore) -> Repository:
    return Repository(store)


@pytest.fixture
def client(store: MemoryStore):
    with TestClient(create_app(store)) as c:
        yield c
