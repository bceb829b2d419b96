"""Tool result envelopes and call logging."""

import json
import logging
from collections.abc import Awaitable, Mapping
from datetime import UTC, datetime
from typing import Any

from mcp.types import CallToolResult, TextContent

logger = logging.getLogger(__name__)
tool_logger = logging.getLogger("monzo_mcp.tools")

MAX_LOGGED_LENGTH = 100
TRUNCATED_LENGTH = 20


def build_params(values: Mapping[str, Any]) -> dict[str, str]:
    """Drop None values and stringify the rest for use as query or form fields."""
    params: dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        else:
            params[key] = str(value)
    return params


def json_response(data: Any) -> CallToolResult:
    """Wrap an API result as pretty-printed JSON text."""
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False))]
    )


def error_response(error: object) -> CallToolResult:
    """Wrap an exception (or any other value) as an error result."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {error}")],
        isError=True,
    )


def _timestamp(dt: datetime) -> str:
    """Format as ISO-8601 UTC with milliseconds and a Z suffix."""
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def log_tool_call(tool: str, params: Mapping[str, Any] | None = None) -> None:
    """Log a tool invocation as one JSON line.

    Long string values are cut down so receipts, URLs and the like do not
    flood the log.
    """
    record: dict[str, Any] = {"ts": _timestamp(datetime.now(UTC)), "tool": tool}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, str) and len(value) > MAX_LOGGED_LENGTH:
            value = value[:TRUNCATED_LENGTH] + "..."
        record[key] = value
    tool_logger.info(json.dumps(record, default=str))


async def run_tool(tool: str, call: Awaitable[Any]) -> CallToolResult:
    """Await one API call and convert the outcome into a tool result."""
    try:
        return json_response(await call)
    except Exception as e:
        logger.warning(f"{tool} failed: {e}")
        return error_response(e)
