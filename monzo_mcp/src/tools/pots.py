"""Pot tools: listing pots and moving money in and out of them.

Amounts are integers in minor units (pence). Monzo uses the dedupe_id to make
repeated deposits and withdrawals idempotent, so callers should generate a
fresh one per intended transfer.
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.responses import log_tool_call, run_tool

Pence = Annotated[int, Field(gt=0, description="Amount in pence (e.g. 1000 = £10.00)")]


def register_pot_tools(server: FastMCP, client: MonzoClient) -> None:
    """Register the pot listing, deposit and withdraw tools."""

    @server.tool(
        name="monzo_list_pots",
        title="List Pots",
        description=(
            "List all pots for a Monzo account. "
            "Returns pot IDs, names, balances, and styles."
        ),
        structured_output=False,
    )
    async def list_pots(
        current_account_id: Annotated[str, Field(description="The account ID to list pots for")],
    ) -> CallToolResult:
        log_tool_call("monzo_list_pots", {"current_account_id": current_account_id})
        return await run_tool(
            "monzo_list_pots",
            client.get("/pots", {"current_account_id": current_account_id}),
        )

    @server.tool(
        name="monzo_deposit_into_pot",
        title="Deposit Into Pot",
        description=(
            "Move money from a Monzo account into a pot. Amount is in pence "
            "(e.g. 1000 = £10.00). Requires a unique dedupe_id to prevent duplicate deposits."
        ),
        structured_output=False,
    )
    async def deposit_into_pot(
        pot_id: Annotated[str, Field(description="The pot ID to deposit into")],
        source_account_id: Annotated[str, Field(description="The account ID to move money from")],
        amount: Pence,
        dedupe_id: Annotated[str, Field(description="Unique string to prevent duplicate deposits")],
    ) -> CallToolResult:
        log_tool_call("monzo_deposit_into_pot", {"pot_id": pot_id, "amount": amount})
        form = {
            "source_account_id": source_account_id,
            "amount": str(amount),
            "dedupe_id": dedupe_id,
        }
        return await run_tool(
            "monzo_deposit_into_pot", client.put_form(f"/pots/{pot_id}/deposit", form)
        )

    @server.tool(
        name="monzo_withdraw_from_pot",
        title="Withdraw From Pot",
        description=(
            "Move money from a pot back into a Monzo account. Amount is in pence "
            "(e.g. 1000 = £10.00). Requires a unique dedupe_id. "
            "Pots with added security cannot be withdrawn via API."
        ),
        structured_output=False,
    )
    async def withdraw_from_pot(
        pot_id: Annotated[str, Field(description="The pot ID to withdraw from")],
        destination_account_id: Annotated[
            str, Field(description="The account ID to move money to")
        ],
        amount: Pence,
        dedupe_id: Annotated[
            str, Field(description="Unique string to prevent duplicate withdrawals")
        ],
    ) -> CallToolResult:
        log_tool_call("monzo_withdraw_from_pot", {"pot_id": pot_id, "amount": amount})
        form = {
            "destination_account_id": destination_account_id,
            "amount": str(amount),
            "dedupe_id": dedupe_id,
        }
        return await run_tool(
            "monzo_withdraw_from_pot", client.put_form(f"/pots/{pot_id}/withdraw", form)
        )
