"""Account tools: identity, account listing and balances."""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.responses import build_params, log_tool_call, run_tool


def register_account_tools(server: FastMCP, client: MonzoClient) -> None:
    """Register the whoami, list accounts and balance tools."""

    @server.tool(
        name="monzo_whoami",
        title="Who Am I",
        description=(
            "Verify the authenticated Monzo user. "
            "Returns user ID, authentication type, and client ID."
        ),
        structured_output=False,
    )
    async def whoami() -> CallToolResult:
        log_tool_call("monzo_whoami")
        return await run_tool("monzo_whoami", client.get("/ping/whoami"))

    @server.tool(
        name="monzo_list_accounts",
        title="List Accounts",
        description=(
            "List the authenticated user's Monzo accounts. "
            "Returns account IDs, types, and descriptions."
        ),
        structured_output=False,
    )
    async def list_accounts(
        account_type: Annotated[
            str | None,
            Field(description="Filter by account type (e.g. 'uk_retail', 'uk_retail_joint')"),
        ] = None,
    ) -> CallToolResult:
        log_tool_call("monzo_list_accounts", {"account_type": account_type})
        params = build_params({"account_type": account_type})
        return await run_tool("monzo_list_accounts", client.get("/accounts", params))

    @server.tool(
        name="monzo_get_balance",
        title="Get Balance",
        description=(
            "Fetch the balance of a Monzo account. Returns balance, total balance, "
            "currency, and spend today (all in minor units / pence)."
        ),
        structured_output=False,
    )
    async def get_balance(
        account_id: Annotated[str, Field(description="The account ID to get the balance for")],
    ) -> CallToolResult:
        log_tool_call("monzo_get_balance", {"account_id": account_id})
        return await run_tool(
            "monzo_get_balance", client.get("/balance", {"account_id": account_id})
        )
