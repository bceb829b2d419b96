"""Feed tools."""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.models import FeedItem
from monzo_mcp.src.responses import log_tool_call, run_tool


def register_feed_tools(server: FastMCP, client: MonzoClient) -> None:
    """Register the create feed item tool."""

    @server.tool(
        name="monzo_create_feed_item",
        title="Create Feed Item",
        description=(
            "Create a feed item in the Monzo app for a given account. The item appears in "
            "the user's transaction feed with a title, body, and optional image."
        ),
        structured_output=False,
    )
    async def create_feed_item(
        account_id: Annotated[str, Field(description="The account ID to create the feed item for")],
        title: Annotated[str, Field(description="The title of the feed item")],
        body: Annotated[str, Field(description="The body text of the feed item")],
        image_url: Annotated[
            str | None, Field(description="URL of an image to display with the feed item")
        ] = None,
        url: Annotated[
            str | None, Field(description="URL to open when the feed item is tapped")
        ] = None,
    ) -> CallToolResult:
        log_tool_call("monzo_create_feed_item", {"account_id": account_id, "title": title})
        item = FeedItem(account_id=account_id, title=title, body=body, image_url=image_url, url=url)
        return await run_tool("monzo_create_feed_item", client.post_form("/feed", item.to_form()))
