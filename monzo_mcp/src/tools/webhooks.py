"""Webhook tools."""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.responses import log_tool_call, run_tool


def register_webhook_tools(server: FastMCP, client: MonzoClient) -> None:
    """Register the webhook register, list and delete tools."""

    @server.tool(
        name="monzo_register_webhook",
        title="Register Webhook",
        description=(
            "Register a webhook URL to receive real-time notifications for a Monzo account. "
            "Each time a transaction is created, Monzo will POST the transaction data to the URL."
        ),
        structured_output=False,
    )
    async def register_webhook(
        account_id: Annotated[str, Field(description="The account ID to register the webhook for")],
        url: Annotated[
            str, Field(description="The URL that Monzo will POST transaction events to")
        ],
    ) -> CallToolResult:
        log_tool_call("monzo_register_webhook", {"account_id": account_id, "url": url})
        return await run_tool(
            "monzo_register_webhook",
            client.post_form("/webhooks", {"account_id": account_id, "url": url}),
        )

    @server.tool(
        name="monzo_list_webhooks",
        title="List Webhooks",
        description="List all registered webhooks for a Monzo account.",
        structured_output=False,
    )
    async def list_webhooks(
        account_id: Annotated[str, Field(description="The account ID to list webhooks for")],
    ) -> CallToolResult:
        log_tool_call("monzo_list_webhooks", {"account_id": account_id})
        return await run_tool(
            "monzo_list_webhooks", client.get("/webhooks", {"account_id": account_id})
        )

    @server.tool(
        name="monzo_delete_webhook",
        title="Delete Webhook",
        description="Delete a registered webhook by its ID.",
        structured_output=False,
    )
    async def delete_webhook(
        webhook_id: Annotated[str, Field(description="The webhook ID to delete")],
    ) -> CallToolResult:
        log_tool_call("monzo_delete_webhook", {"webhook_id": webhook_id})
        return await run_tool("monzo_delete_webhook", client.delete(f"/webhooks/{webhook_id}"))
