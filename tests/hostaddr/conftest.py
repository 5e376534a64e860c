from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from hostaddr.app import app
from hostaddr.config import get_settings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for key in ("APP_NAME", "IPV6_PADDED", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)
