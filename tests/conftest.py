"""
Shared fixtures: a FakeStoreClient wired to an in-memory upstream
"""

import json

import httpx
import pytest

from fakestore_mcp.services.fakestore.api_client import FakeStoreClient

BASE_URL = "https://fakestoreapi.com"


class FakeUpstream:
    """Records every request and answers with a canned JSON payload"""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.payload = {}
        self.responder = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responder:
            return self.responder(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_client(upstream):
    """Factory so tests can attach a rate limiter or monitor"""
    def factory(**kwargs):
        http_client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(upstream))
        return FakeStoreClient(http_client=http_client, **kwargs)
    return factory


@pytest.fixture
def client(make_client):
    return make_client()
