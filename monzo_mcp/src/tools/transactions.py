"""Transaction tools."""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.responses import build_params, log_tool_call, run_tool


def register_transaction_tools(server: FastMCP, client: MonzoClient) -> None:
    """Register the list, get and annotate transaction tools."""

    @server.tool(
        name="monzo_list_transactions",
        title="List Transactions",
        description=(
            "List transactions for a Monzo account. Returns transaction amounts, merchants, "
            "categories, and metadata. Note: transaction history is limited to 90 days "
            "for API access."
        ),
        structured_output=False,
    )
    async def list_transactions(
        account_id: Annotated[str, Field(description="The account ID to list transactions for")],
        since: Annotated[
            str | None,
            Field(
                description=(
                    "RFC 3339 timestamp or object ID to filter transactions after "
                    "(e.g. '2024-01-01T00:00:00Z')"
                )
            ),
        ] = None,
        before: Annotated[
            str | None, Field(description="RFC 3339 timestamp to filter transactions before")
        ] = None,
        limit: Annotated[
            int | None,
            Field(gt=0, le=100, description="Number of results per page (default 30, max 100)"),
        ] = None,
    ) -> CallToolResult:
        args = {"account_id": account_id, "since": since, "before": before, "limit": limit}
        log_tool_call("monzo_list_transactions", args)
        params = build_params(args)
        return await run_tool("monzo_list_transactions", client.get("/transactions", params))

    @server.tool(
        name="monzo_get_transaction",
        title="Get Transaction",
        description=(
            "Retrieve details of a single Monzo transaction by its ID. "
            "Optionally expand merchant details."
        ),
        structured_output=False,
    )
    async def get_transaction(
        transaction_id: Annotated[str, Field(description="The transaction ID to look up")],
        expand_merchant: Annotated[
            bool | None, Field(description="Set to true to include full merchant details")
        ] = None,
    ) -> CallToolResult:
        log_tool_call("monzo_get_transaction", {"transaction_id": transaction_id})
        params = {"expand[]": "merchant"} if expand_merchant else {}
        return await run_tool(
            "monzo_get_transaction",
            client.get(f"/transactions/{transaction_id}", params),
        )

    @server.tool(
        name="monzo_annotate_transaction",
        title="Annotate Transaction",
        description=(
            "Add custom metadata/annotations to a Monzo transaction. "
            "You can store key-value pairs on the transaction."
        ),
        structured_output=False,
    )
    async def annotate_transaction(
        transaction_id: Annotated[str, Field(description="The transaction ID to annotate")],
        key: Annotated[
            str, Field(description="The metadata key (will be stored as metadata[key])")
        ],
        value: Annotated[
            str, Field(description="The metadata value. Set to empty string to delete the key.")
        ],
    ) -> CallToolResult:
        # metadata values are not logged
        log_tool_call("monzo_annotate_transaction", {"transaction_id": transaction_id, "key": key})
        form = {f"metadata[{key}]": value}
        return await run_tool(
            "monzo_annotate_transaction",
            client.patch_form(f"/transactions/{transaction_id}", form),
        )
