# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Shared fixtures: a fake Graph API served through httpx.MockTransport and an
# application wired to it.
# =============================================================================

import os

# Set up test environment BEFORE any imports: metagate.main builds a default
# app at import time.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("META_ACCESS_TOKEN", "env-token")

from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient

from metagate.config import Settings
from metagate.main import create_app

API_VERSION = "v18.0"


class FakeGraph:
    """Records outbound Graph API requests and replays canned responses."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.default: Tuple[int, Any] = (200, {"data": [], "paging": {}})
        self.raises: Optional[Callable[[httpx.Request], Exception]] = None

    def respond(self, path: str, status: int = 200, json: Any = None, method: str = "GET"):
        self.responses[(method, f"/{API_VERSION}{path}")] = (status, json)

    def fail_with(self, factory: Callable[[httpx.Request], Exception]):
        self.raises = factory

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raises is not None:
            raise self.raises(request)
        status, body = self.responses.get(
            (request.method, request.url.path), self.default
        )
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_path(self) -> str:
        return self.last.url.path.removeprefix(f"/{API_VERSION}")


def make_settings(**overrides) -> Settings:
    values = {
        "meta_access_token": "test-token",
        "meta_account_id": "1234567890",
        "meta_app_id": "app-1",
        "meta_app_secret": "app-secret-value",
        "environment": "development",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def graph() -> FakeGraph:
    return FakeGraph()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings, graph):
    return create_app(settings, transport=graph.transport)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
