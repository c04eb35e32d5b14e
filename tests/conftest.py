import json

import httpx
import pytest

from core.config import ConfigLoader
from core.http_client import ConfluenceClient
from core.registry import ToolRegistry, discover_endpoints

BASE_URL = "https://example.atlassian.net/wiki/api/v2"


class FakeConfluence:
    """httpx MockTransport handler that records requests and replays one canned response."""

    def __init__(self, status_code: int = 200, body=None, content: bytes | None = None):
        self.status_code = status_code
        self.body = {"ok": True} if body is None and content is None else body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def fake():
    return FakeConfluence()


@pytest.fixture
async def client(fake):
    c = ConfluenceClient(BASE_URL, timeout=5.0, transport=httpx.MockTransport(fake))
    yield c
    await c.aclose()


@pytest.fixture(scope="session")
def endpoints():
    return discover_endpoints()


@pytest.fixture
def registry(endpoints, client):
    return ToolRegistry(endpoints.values(), client)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the config loader at a temporary config.yaml written by the test."""

    def write(text: str):
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        monkeypatch.setenv("CONFLUENCE_MCP_CONFIG", str(path))
        ConfigLoader.reset()
        return path

    yield write
    ConfigLoader.reset()
