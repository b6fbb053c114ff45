"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from random_provider.config import Settings
from random_provider.dependencies import get_random_source
from random_provider.main import create_app


class StubRandom:
    """Deterministic random source that replays a fixed sequence of draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return value


@pytest.fixture
def stub_random():
    return StubRandom


@pytest.fixture
def settings():
    return Settings(API_PREFIX="/proxy/v1", LOG_LEVEL="DEBUG", ENABLE_DETAILED_LOGGING=True)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fixed_client(app):
    """Client whose random source always draws 0.5."""
    app.dependency_overrides[get_random_source] = lambda: StubRandom([0.5])
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
