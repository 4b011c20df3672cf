"""Shared fixtures for the homepage service tests.

The upstream title fragment service is replaced by ``httpx.MockTransport``;
no test touches the network.
"""
from pathlib import Path
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app
from app.services.fragment_client import get_fragment_client

FORGE_HOST = "stops.r-forge.r-project.org"
FRAGMENT_HTML = b'<h2 class="project-title">Structure Optimized Proximity Scaling</h2>\n'
TAIL_HTML = b"<html><body><h1>STOPS tutorial</h1>\n<p>\xc3\xa9 &amp; more</p></body></html>\n"


def _fragment_ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=FRAGMENT_HTML)


def _fragment_refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def tail_file(tmp_path: Path) -> Path:
    path = tmp_path / "stops.html"
    path.write_bytes(TAIL_HTML)
    return path


@pytest.fixture
def settings(tail_file: Path) -> Settings:
    return Settings(TAIL_FILE=str(tail_file))


@pytest.fixture
def make_client() -> Callable[..., httpx.Client]:
    """Build an httpx client answering through ``handler``; requests are recorded."""
    clients = []

    def _make(handler=_fragment_ok, seen: list | None = None) -> httpx.Client:
        def _handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_handler), follow_redirects=True)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def refused_handler():
    return _fragment_refused


@pytest.fixture
def upstream() -> dict:
    """Behaviour of the fake fragment service; tests may swap the handler."""
    return {"handler": _fragment_ok, "seen": []}


@pytest.fixture
def api(settings: Settings, make_client, upstream: dict):
    """TestClient for the app addressed as the STOPS project host."""
    state = upstream

    def _client_override():
        yield make_client(state["handler"], state["seen"])

    app.dependency_overrides[get_fragment_client] = _client_override
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app, base_url=f"http://{FORGE_HOST}")
    finally:
        app.dependency_overrides.clear()
