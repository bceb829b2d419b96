"""MCP server exposing the Monzo API as tools over stdio."""

import asyncio
import logging

from mcp.server.fastmcp import FastMCP

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.config import SERVER_NAME
from monzo_mcp.src.tools.accounts import register_account_tools
from monzo_mcp.src.tools.attachments import register_attachment_tools
from monzo_mcp.src.tools.feed import register_feed_tools
from monzo_mcp.src.tools.pots import register_pot_tools
from monzo_mcp.src.tools.receipts import register_receipt_tools
from monzo_mcp.src.tools.transactions import register_transaction_tools
from monzo_mcp.src.tools.webhooks import register_webhook_tools

logger = logging.getLogger(__name__)

TOOL_GROUPS = (
    register_account_tools,
    register_pot_tools,
    register_transaction_tools,
    register_feed_tools,
    register_attachment_tools,
    register_receipt_tools,
    register_webhook_tools,
)


def create_server(client: MonzoClient) -> FastMCP:
    """Build the MCP server with every Monzo tool bound to `client`."""
    server = FastMCP(SERVER_NAME)
    for register in TOOL_GROUPS:
        register(server, client)
    return server


async def serve_stdio(token: str) -> None:
    """Serve the Monzo tools over stdio until the client disconnects."""
    async with MonzoClient(token) as client:
        server = create_server(client)
        logger.info("Monzo MCP Server running on stdio")
        await server.run_stdio_async()


def run(token: str) -> None:
    """Run the stdio server on a fresh event loop."""
    asyncio.run(serve_stdio(token))
