"""Shared fixtures for the author directory test suite."""
import asyncio
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to path so imports work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from services.author_directory.client import DirectoryClient  # noqa: E402
from services.author_directory.gateway import DataGateway  # noqa: E402
from services.author_directory.orchestrator import RefreshOrchestrator  # noqa: E402


BASE_URL = "https://directory.test"

# Route value that makes the fake transport fail the connection
FAIL = "FAIL"


# ── Remote payloads in the directory API's JSON shape ───────────────────

LEANNE = {
    "id": 1,
    "name": "Leanne",
    "username": "Bret",
    "email": "leanne@example.com",
    "company": {"name": "Acme", "catchPhrase": "Go"},
}

ERVIN = {
    "id": 2,
    "name": "Ervin",
    "username": "Antonette",
    "email": "ervin@example.com",
    "company": {"name": "Deckow-Crist", "catchPhrase": "Proactive didactic contingency"},
}

POST_1 = {"id": 1, "title": "T", "body": "B", "userId": 1}
POST_2 = {"id": 2, "title": "Second", "body": "More words", "userId": 1}
POST_11 = {"id": 11, "title": "Ervin's post", "body": "Hello", "userId": 2}

COMMENTS_2 = [
    {"id": 6, "postId": 2, "name": "first", "body": "nice", "email": "a@example.com"},
    {"id": 7, "postId": 2, "name": "second", "body": "agreed", "email": "b@example.com"},
]


def default_routes():
    return {
        "/users": [LEANNE, ERVIN],
        "/users/1": LEANNE,
        "/users/2": ERVIN,
        "/posts?userId=1": [POST_1, POST_2],
        "/posts?userId=2": [POST_11],
        "/comments?postId=1": [],
        "/comments?postId=2": COMMENTS_2,
        "/comments?postId=11": [],
    }


def route_key(request: httpx.Request) -> str:
    query = "&".join(f"{key}={value}" for key, value in request.url.params.multi_items())
    return f"{request.url.path}?{query}" if query else request.url.path


def make_transport(routes, request_log) -> httpx.MockTransport:
    """Serve routes from a dict: JSON values, raw bytes, FAIL, or 404 when absent."""
    def handler(request: httpx.Request) -> httpx.Response:
        key = route_key(request)
        request_log.append(key)

        if key not in routes:
            return httpx.Response(404, json={})
        value = routes[key]
        if value == FAIL:
            raise httpx.ConnectError("connection refused", request=request)
        if isinstance(value, bytes):
            return httpx.Response(200, content=value)
        return httpx.Response(200, json=value)

    return httpx.MockTransport(handler)


@pytest.fixture
def request_log():
    return []


@pytest.fixture
def make_gateway(request_log):
    """Factory: build a DataGateway whose client talks to a fake transport."""
    clients = []

    def _make(routes=None):
        routes = default_routes() if routes is None else routes
        client = DirectoryClient(base_url=BASE_URL, transport=make_transport(routes, request_log))
        clients.append(client)
        return DataGateway(client)

    yield _make

    for client in clients:
        asyncio.run(client.aclose())


@pytest.fixture
def gateway(make_gateway):
    return make_gateway()


@pytest.fixture
def orchestrator(gateway):
    return RefreshOrchestrator(gateway)
