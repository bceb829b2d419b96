"""Shared utilities for the Monzo MCP server."""

import json
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from rich.console import Console

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.config import ENV_SECRETS_FILE, TOKEN_ENV_VAR, TOKEN_FILE

# stdout carries the MCP protocol, so human output goes to stderr
console = Console(stderr=True)


class MissingTokenError(FileNotFoundError):
    """Raised when no access token is available at startup."""

    def __init__(self) -> None:
        """Initialize with setup instructions."""
        super().__init__(
            f"Missing required environment variable: {TOKEN_ENV_VAR}\n"
            f"Set it, add it to {ENV_SECRETS_FILE.name}, or save a token to {TOKEN_FILE.name}."
        )


def load_env_secrets() -> None:
    """Load variables from .env.secrets file into environment."""
    if ENV_SECRETS_FILE.exists():
        for raw_line in ENV_SECRETS_FILE.read_text().splitlines():
            line = raw_line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                os.environ.setdefault(key.strip(), value.strip())


def load_token_data() -> dict | None:
    """Load full token data from file if exists."""
    if TOKEN_FILE.exists():
        return json.loads(TOKEN_FILE.read_text())
    return None


def token_source() -> str | None:
    """Return where the access token will be read from: "env", "file" or None."""
    if os.environ.get(TOKEN_ENV_VAR):
        return "env"
    data = load_token_data()
    if data and data.get("access_token"):
        return "file"
    return None


def load_token() -> str:
    """Load the access token, preferring the environment over the token file.

    Raises:
        MissingTokenError: If neither source has a token.
    """
    token = os.environ.get(TOKEN_ENV_VAR)
    if token:
        return token
    data = load_token_data()
    if data and data.get("access_token"):
        return data["access_token"]
    raise MissingTokenError


@asynccontextmanager
async def monzo_client(token: str | None = None) -> AsyncIterator[MonzoClient]:
    """Create authenticated Monzo client.

    Args:
        token: Access token. If None, loads from environment or file.
    """
    if token is None:
        token = load_token()
    client = MonzoClient(token)
    try:
        yield client
    finally:
        await client.aclose()
