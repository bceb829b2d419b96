"""Monzo MCP server CLI."""

import asyncio
import logging

import httpx
import typer
from rich.table import Table

from monzo_mcp.src.client import MonzoApiError, MonzoClient
from monzo_mcp.src.config import API_URL, LOG_LEVEL, SERVER_NAME, SERVER_VERSION, TOKEN_FILE
from monzo_mcp.src.server import create_server, run
from monzo_mcp.src.utils import (
    MissingTokenError,
    console,
    load_env_secrets,
    load_token,
    monzo_client,
    token_source,
)

app = typer.Typer(help="Expose the Monzo API to MCP clients over stdio.")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send log records to stderr, keeping stdout free for the protocol."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _require_token() -> str:
    """Load the access token or exit with a readable message."""
    load_env_secrets()
    try:
        return load_token()
    except MissingTokenError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1) from e


@app.command()
def serve() -> None:
    """Run the MCP server on stdio."""
    token = _require_token()
    configure_logging()
    run(token)


@app.command()
def status() -> None:
    """Show where the access token comes from and which API is used."""
    load_env_secrets()
    console.print(f"[bold]{SERVER_NAME}[/bold] {SERVER_VERSION}\n")
    console.print(f"  API: {API_URL}")

    source = token_source()
    if source is None:
        console.print("  [red]Token:[/red] Not found")
        return

    token = load_token()
    where = "environment" if source == "env" else TOKEN_FILE.name
    console.print(f"  [green]Token:[/green] {where}")
    console.print(f"         [dim]{token[:8]}...[/dim]")


async def _whoami(token: str) -> dict:
    async with monzo_client(token) as client:
        return await client.get("/ping/whoami")


async def _list_tools() -> list:
    # list_tools makes no API calls
    async with MonzoClient("unused") as client:
        return await create_server(client).list_tools()


@app.command()
def whoami() -> None:
    """Check the access token against /ping/whoami."""
    token = _require_token()
    try:
        data = asyncio.run(_whoami(token))
    except MonzoApiError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1) from e
    except httpx.TransportError as e:
        console.print(f"Could not reach {API_URL}: {e}", style="red", markup=False)
        raise typer.Exit(1) from e

    table = Table(title="Authenticated user", show_header=True, header_style="bold")
    table.add_column("Field")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def tools() -> None:
    """List the tools the server exposes."""
    registered = asyncio.run(_list_tools())

    table = Table(title="Tools", show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Title")
    for tool in registered:
        table.add_row(tool.name, tool.title or "")
    console.print(table)


if __name__ == "__main__":
    app()
