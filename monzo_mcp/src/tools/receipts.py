"""Receipt tools."""

import json
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.models import Receipt
from monzo_mcp.src.responses import log_tool_call, run_tool

ITEMS_DESCRIPTION = (
    "JSON array of receipt items, each with: description (string), amount (integer in pence), "
    "currency (string, e.g. 'GBP'), quantity (number). Example: "
    '[{"description":"Coffee","amount":350,"currency":"GBP","quantity":1}]'
)


def register_receipt_tools(server: FastMCP, client: MonzoClient) -> None:
    """Register the create, get and delete receipt tools."""

    @server.tool(
        name="monzo_create_receipt",
        title="Create/Update Receipt",
        description=(
            "Create or update a receipt on a Monzo transaction. Provide the transaction ID "
            "and receipt items as a JSON structure."
        ),
        structured_output=False,
    )
    async def create_receipt(
        transaction_id: Annotated[
            str, Field(description="The transaction ID to attach the receipt to")
        ],
        items: Annotated[str, Field(description=ITEMS_DESCRIPTION)],
        tax: Annotated[int | None, Field(description="Total tax amount in pence")] = None,
    ) -> CallToolResult:
        log_tool_call("monzo_create_receipt", {"transaction_id": transaction_id})

        async def call() -> object:
            # one receipt per transaction, keyed by its ID
            receipt = Receipt(
                transaction_id=transaction_id,
                external_id=transaction_id,
                items=json.loads(items),
                tax=tax,
            )
            return await client.put_json("/transaction-receipts", receipt.to_body())

        return await run_tool("monzo_create_receipt", call())

    @server.tool(
        name="monzo_get_receipt",
        title="Get Receipt",
        description="Retrieve a receipt attached to a Monzo transaction.",
        structured_output=False,
    )
    async def get_receipt(
        external_id: Annotated[
            str,
            Field(description="The external ID (typically the transaction ID) of the receipt"),
        ],
    ) -> CallToolResult:
        log_tool_call("monzo_get_receipt", {"external_id": external_id})
        return await run_tool(
            "monzo_get_receipt",
            client.get("/transaction-receipts", {"external_id": external_id}),
        )

    @server.tool(
        name="monzo_delete_receipt",
        title="Delete Receipt",
        description="Delete a receipt from a Monzo transaction.",
        structured_output=False,
    )
    async def delete_receipt(
        external_id: Annotated[
            str,
            Field(
                description=(
                    "The external ID (typically the transaction ID) of the receipt to delete"
                )
            ),
        ],
    ) -> CallToolResult:
        log_tool_call("monzo_delete_receipt", {"external_id": external_id})
        return await run_tool(
            "monzo_delete_receipt",
            client.delete("/transaction-receipts", {"external_id": external_id}),
        )
