import json

import httpx
import pytest


BASE_URL = "http://localhost:8000"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def server_state():
    """Collections known to the simulated server, keyed by name."""
    return {}


@pytest.fixture
def chroma_handler(server_state):
    """Request handler imitating the collection endpoints of a Chroma server."""

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path

        if request.method == "GET" and path == "/heartbeat":
            return httpx.Response(200, json={"nanosecond heartbeat": 1700000000000000000})

        if request.method == "POST" and path == "/api/v1/collections":
            try:
                name = json.loads(request.content)["name"]
            except (ValueError, KeyError):
                return httpx.Response(422, json={"error": "invalid payload"})
            if name in server_state:
                return httpx.Response(409, json={"error": f"Collection {name} already exists"})
            server_state[name] = {"id": str(len(server_state) + 1), "name": name, "metadata": None}
            return httpx.Response(200, json=server_state[name])

        if request.method == "GET" and path.startswith("/api/v1/collections/"):
            name = path.rsplit("/", 1)[-1]
            if name not in server_state:
                return httpx.Response(404, json={"error": f"Collection {name} does not exist"})
            return httpx.Response(200, json=server_state[name])

        return httpx.Response(404, json={"detail": "Not Found"})

    return handler


@pytest.fixture
def mock_transport(chroma_handler):
    return httpx.MockTransport(chroma_handler)


@pytest.fixture
def refused_transport():
    """Transport that fails every request with a connection error."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def recording_transport(recorded_requests):
    """Transport answering 200 with an empty object and keeping every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        request.read()
        recorded_requests.append(request)
        return httpx.Response(200, json={})

    return httpx.MockTransport(handler)
