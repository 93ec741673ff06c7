from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from cicd_demo.api.app import create_app
from cicd_demo.core.config import Settings, get_settings
from cicd_demo.core.identity import ProcessIdentity

_ENV_VARS = ("PORT", "HOST", "APP_VERSION", "APP_ENV")


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, app_version="1.2.3")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def identity(settings: Settings, clock: FakeClock) -> ProcessIdentity:
    return ProcessIdentity(version=settings.app_version, clock=clock)


@pytest.fixture
def client(settings: Settings, identity: ProcessIdentity) -> Iterator[TestClient]:
    with TestClient(create_app(settings, identity)) as test_client:
        yield test_client
