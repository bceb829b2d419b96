"""Monzo API client.

Turns a call into a signed, correctly encoded HTTP request and maps the
response onto either the decoded JSON payload or a MonzoApiError.
"""

import json
from typing import Any, Literal
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from monzo_mcp.src.config import API_URL

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

Method = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


class MonzoApiError(Exception):
    """Raised when the Monzo API answers with a non-2xx status."""

    def __init__(self, status: int, error_code: str, message: str) -> None:
        """Initialize with the status and the fields extracted from the body."""
        super().__init__(f"Monzo API error ({status}): {error_code} - {message}")
        self.status = status
        self.error_code = error_code
        self.message = message


def parse_api_error(status: int, body: str) -> MonzoApiError:
    """Build a MonzoApiError from a failed response body.

    Monzo error bodies are usually JSON with `error` and `message` (or the
    OAuth style `error_description`), but proxies in front of the API can
    return plain text or HTML.
    """
    try:
        parsed = json.loads(body)
    except ValueError:
        return MonzoApiError(status, "unknown", f"HTTP {status} error")

    if not isinstance(parsed, dict):
        parsed = {}

    code = parsed.get("error")
    message = parsed.get("message")
    if message is None:
        message = parsed.get("error_description")

    return MonzoApiError(
        status,
        "unknown" if code is None else code,
        f"HTTP {status}" if message is None else message,
    )


class FormBody(BaseModel):
    """Request body sent as application/x-www-form-urlencoded."""

    model_config = {"frozen": True}

    data: dict[str, str]


class JsonBody(BaseModel):
    """Request body sent as compact JSON."""

    model_config = {"frozen": True}

    value: Any


class RequestDescriptor(BaseModel):
    """A fully encoded request, ready for the transport."""

    model_config = {"frozen": True}

    method: Method
    url: str
    headers: dict[str, str]
    content: str | None = None


def encode_request(
    token: str,
    method: Method,
    path: str,
    params: dict[str, str] | None = None,
    body: FormBody | JsonBody | None = None,
) -> RequestDescriptor:
    """Encode a request against the Monzo API base URL.

    Args:
        token: Access token for the Authorization header.
        method: HTTP method.
        path: Resource path, resolved against API_URL.
        params: Query parameters. Each key is set once, later values win.
        body: Form or JSON body, or None for no body.

    Returns:
        The request descriptor. Encoding is pure, so equal inputs give equal
        descriptors.
    """
    url = httpx.URL(API_URL).join(path)
    for key, value in (params or {}).items():
        url = url.copy_set_param(key, value)

    headers = {"Authorization": f"Bearer {token}"}
    content = None

    if isinstance(body, FormBody):
        headers["Content-Type"] = FORM_CONTENT_TYPE
        content = urlencode(body.data)
    elif isinstance(body, JsonBody):
        headers["Content-Type"] = JSON_CONTENT_TYPE
        content = json.dumps(body.value, separators=(",", ":"), ensure_ascii=False)

    return RequestDescriptor(method=method, url=str(url), headers=headers, content=content)


class MonzoClient:
    """Authenticated async client for the Monzo API.

    One method per request shape the tools need. Non-2xx responses raise
    MonzoApiError. Transport failures (httpx.TransportError) propagate as-is,
    so callers can tell a rejected request from one that never arrived.
    Each call only suspends the task awaiting it, so calls can run
    concurrently on one client.
    """

    def __init__(
        self,
        token: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: Monzo access token, used as-is for the client's lifetime.
            timeout: Seconds before httpx gives up. The default None waits
                forever; callers wanting a bound pass one here or cancel the task.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self._token = token
        self._http = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"MonzoClient(api_url={API_URL!r})"

    async def __aenter__(self) -> "MonzoClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET with optional query parameters."""
        return await self._request("GET", path, params=params)

    async def post_form(self, path: str, data: dict[str, str] | None = None) -> Any:
        """POST a form-encoded body."""
        return await self._request("POST", path, body=_form(data))

    async def put_form(self, path: str, data: dict[str, str] | None = None) -> Any:
        """PUT a form-encoded body."""
        return await self._request("PUT", path, body=_form(data))

    async def patch_form(self, path: str, data: dict[str, str] | None = None) -> Any:
        """PATCH a form-encoded body."""
        return await self._request("PATCH", path, body=_form(data))

    async def put_json(self, path: str, value: Any = None) -> Any:
        """PUT a JSON body. A None value sends no body at all."""
        body = None if value is None else JsonBody(value=value)
        return await self._request("PUT", path, body=body)

    async def delete(self, path: str, params: dict[str, str] | None = None) -> Any:
        """DELETE with optional query parameters."""
        return await self._request("DELETE", path, params=params)

    async def _request(
        self,
        method: Method,
        path: str,
        params: dict[str, str] | None = None,
        body: FormBody | JsonBody | None = None,
    ) -> Any:
        """Send one request and decode the response.

        Returns:
            The decoded JSON payload, or {} for an empty body.

        Raises:
            MonzoApiError: If the final response status is not 2xx.
            json.JSONDecodeError: If a 2xx body is not valid JSON.
        """
        request = encode_request(self._token, method, path, params, body)

        resp = await self._http.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.content,
        )

        if not resp.is_success:
            raise parse_api_error(resp.status_code, resp.text)

        text = resp.text
        if not text:
            return {}
        return json.loads(text)


def _form(data: dict[str, str] | None) -> FormBody | None:
    return None if data is None else FormBody(data=data)
