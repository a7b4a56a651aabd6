"""Test configuration and fixtures for SDK tests."""

import asyncio
import json
import threading
import time
from typing import Any, Callable, Union

import httpx
import pytest

from eversend import AsyncEversend, Eversend

BASE_URL = "https://api.test/v1"
PREFIX = "/v1"

Reply = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


def envelope(data: Any, code: int = 200) -> dict[str, Any]:
    """Wrap ``data`` the way the API wraps most response bodies."""
    return {"code": code, "success": True, "data": data}


class FakeApi:
    """Stands in for the Eversend API behind an ``httpx.MockTransport``.

    Replies queued for a route are served in order; the last one repeats.
    The identity endpoint hands out ``tok-a``, ``tok-b``, ... unless told
    otherwise.
    """

    def __init__(self, auth_delay: float = 0.0) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], list[Reply]] = {}
        self.auth_delay = auth_delay
        self.auth_extra: dict[str, Any] = {}
        self.issued = 0
        self._lock = threading.Lock()

    def on(self, method: str, path: str, *replies: Reply) -> "FakeApi":
        self.routes[(method, path)] = list(replies)
        return self

    def json(self, method: str, path: str, body: Any, status_code: int = 200) -> "FakeApi":
        return self.on(method, path, httpx.Response(status_code, json=body))

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and r.url.path == PREFIX + path
        ]

    @property
    def auth_calls(self) -> list[httpx.Request]:
        return self.calls("GET", "/auth/token")

    def _issue_token(self) -> httpx.Response:
        with self._lock:
            value = f"tok-{chr(ord('a') + self.issued)}"
            self.issued += 1
        return httpx.Response(200, json={"status": 200, "token": value, **self.auth_extra})

    def _reply(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path[len(PREFIX):]
        replies = self.routes.get((request.method, path))
        if replies is None:
            if (request.method, path) == ("GET", "/auth/token"):
                return self._issue_token()
            return httpx.Response(404, json={"message": f"no route for {path}"})
        with self._lock:
            reply = replies.pop(0) if len(replies) > 1 else replies[0]
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        return reply

    def handler(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)
        if self.auth_delay and request.url.path == PREFIX + "/auth/token":
            time.sleep(self.auth_delay)
        return self._reply(request)

    async def async_handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.auth_delay and request.url.path == PREFIX + "/auth/token":
            await asyncio.sleep(self.auth_delay)
        return self._reply(request)


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


@pytest.fixture
def client_id() -> str:
    """Return a test client ID."""
    return "id1"


@pytest.fixture
def client_secret() -> str:
    """Return a test client secret."""
    return "secret1"


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(api: FakeApi, client_id: str, client_secret: str):
    http = httpx.Client(transport=httpx.MockTransport(api.handler))
    with Eversend(client_id, client_secret, base_url=BASE_URL, http_client=http) as c:
        yield c
    http.close()


@pytest.fixture
def make_async_client(client_id: str, client_secret: str):
    def make(api: FakeApi) -> AsyncEversend:
        http = httpx.AsyncClient(transport=httpx.MockTransport(api.async_handler))
        return AsyncEversend(client_id, client_secret, base_url=BASE_URL, http_client=http)

    return make
