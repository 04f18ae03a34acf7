"""Shared fixtures for backend tests."""

import json

import httpx
import pytest

from festival.backend.client import BackendClient

BASE_URL = "https://festival.example.com"
API_KEY = "anon-key"


class FakeBackend:
    """Transport handler that records requests and replays queued responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def reply(self, status: int = 200, body=None, headers: dict | None = None) -> None:
        if body is None:
            self._responses.append(httpx.Response(status, headers=headers))
        else:
            self._responses.append(httpx.Response(status, json=body, headers=headers))

    def fail(self, error: Exception) -> None:
        self._responses.append(error)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def client(fake_backend):
    with BackendClient(BASE_URL + "/", API_KEY, transport=httpx.MockTransport(fake_backend)) as c:
        yield c
