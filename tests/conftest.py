"""Pytest fixtures for Monzo MCP tests."""

import asyncio
import json
import os
from pathlib import Path

import httpx
import pytest
from mcp.server.fastmcp import FastMCP
from pytest_mock import MockerFixture

from monzo_mcp.src.client import MonzoApiError, MonzoClient

PROJECT_ROOT = Path(__file__).parent.parent
TOKEN_FILE = PROJECT_ROOT / ".monzo_token.json"


def _live_token() -> str | None:
    """Token for live tests, from the environment or the token file."""
    if os.environ.get("MONZO_ACCESS_TOKEN"):
        return os.environ["MONZO_ACCESS_TOKEN"]
    if TOKEN_FILE.exists():
        return json.loads(TOKEN_FILE.read_text()).get("access_token")
    return None


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(recorded_requests: list[httpx.Request]):
    """Factory fixture for a MonzoClient whose transport returns a canned response.

    `body` may be a str (sent verbatim) or any JSON-serializable value.
    """
    clients: list[MonzoClient] = []

    def _make_client(status: int = 200, body: object = "", token: str = "test-token"):
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if isinstance(body, str):
                return httpx.Response(status, text=body)
            return httpx.Response(status, json=body)

        client = MonzoClient(token, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make_client

    for client in clients:
        asyncio.run(client.aclose())


@pytest.fixture
def mock_client(mocker: MockerFixture):
    """A MonzoClient stand-in whose every call resolves to {"data": "mock"}.

    spec= makes each async method an AsyncMock.
    """
    client = mocker.MagicMock(spec=MonzoClient)
    for name in ("get", "post_form", "put_form", "patch_form", "put_json", "delete"):
        getattr(client, name).return_value = {"data": "mock"}
    return client


@pytest.fixture
def tool_server(mocker: MockerFixture):
    """A FastMCP stand-in that records tool handlers by name.

    Returns (server, tools) where tools maps tool name to a plain function that
    runs the async handler to completion.
    """
    tools: dict = {}
    server = mocker.MagicMock(spec=FastMCP)

    def tool(name: str, **kwargs):
        def decorator(fn):
            tools[name] = lambda **arguments: asyncio.run(fn(**arguments))
            return fn

        return decorator

    server.tool.side_effect = tool
    return server, tools


@pytest.fixture(scope="session")
def access_token() -> str | None:
    """Load access token if available."""
    return _live_token()




@pytest.fixture(scope="session")
def live_get(access_token: str | None):
    """GET against the real API with a short-lived client per call."""

    async def _get(path: str, params: dict[str, str] | None = None):
        async with MonzoClient(access_token, timeout=30.0) as client:
            return await client.get(path, params)

    def _live_get(path: str, params: dict[str, str] | None = None):
        return asyncio.run(_get(path, params))

    return _live_get


@pytest.fixture(scope="session")
def account_id(access_token: str | None, live_get) -> str | None:
    """Get the first active uk_retail account ID."""
    if not access_token:
        return None
    try:
        accounts = live_get("/accounts", {"account_type": "uk_retail"})["accounts"]
    except (MonzoApiError, httpx.HTTPError):
        return None
    for acc in accounts:
        if not acc.get("closed", False):
            return acc["id"]
    return None


requires_token = pytest.mark.skipif(
    _live_token() is None,
    reason="No MONZO_ACCESS_TOKEN or .monzo_token.json found",
)
