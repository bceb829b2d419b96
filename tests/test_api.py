"""End-to-end tests against the real Monzo API.

These tests require MONZO_ACCESS_TOKEN or a token in .monzo_token.json and
are skipped otherwise. They only read data.
"""

import asyncio

import pytest

from monzo_mcp.src.client import MonzoApiError, MonzoClient
from tests.conftest import requires_token


@requires_token
class TestAuthentication:
    """Test authentication endpoints."""

    def test_whoami(self, live_get) -> None:
        """Test /ping/whoami returns authenticated user info."""
        data = live_get("/ping/whoami")
        assert data["authenticated"] is True
        assert "user_id" in data
        assert "client_id" in data

    def test_bad_token_is_api_error(self) -> None:
        """Test an invalid token surfaces as a 401 MonzoApiError."""

        async def whoami():
            async with MonzoClient("not-a-real-token", timeout=30.0) as client:
                return await client.get("/ping/whoami")

        with pytest.raises(MonzoApiError) as exc_info:
            asyncio.run(whoami())
        assert exc_info.value.status == 401


@requires_token
class TestAccounts:
    """Test account endpoints."""

    def test_list_retail_accounts(self, live_get) -> None:
        """Test listing uk_retail accounts only."""
        data = live_get("/accounts", {"account_type": "uk_retail"})
        for account in data["accounts"]:
            assert account["type"] == "uk_retail"

    def test_get_balance(self, live_get, account_id: str) -> None:
        """Test getting account balance in minor units."""
        if not account_id:
            pytest.skip("No active account found")

        data = live_get("/balance", {"account_id": account_id})
        assert isinstance(data["balance"], int)
        assert "currency" in data


@requires_token
class TestPotsAndWebhooks:
    """Test pot and webhook listing."""

    def test_list_pots(self, live_get, account_id: str) -> None:
        """Test listing pots for an account."""
        if not account_id:
            pytest.skip("No active account found")

        data = live_get("/pots", {"current_account_id": account_id})
        assert "pots" in data

    def test_list_webhooks(self, live_get, account_id: str) -> None:
        """Test listing webhooks for an account."""
        if not account_id:
            pytest.skip("No active account found")

        data = live_get("/webhooks", {"account_id": account_id})
        assert "webhooks" in data


@requires_token
class TestTransactions:
    """Test transaction endpoints."""

    def test_get_single_transaction(self, live_get, account_id: str) -> None:
        """Test getting a single transaction with expanded merchant."""
        if not account_id:
            pytest.skip("No active account found")

        transactions = live_get(
            "/transactions", {"account_id": account_id, "limit": "1"}
        ).get("transactions", [])
        if not transactions:
            pytest.skip("No transactions found")

        tx_id = transactions[0]["id"]
        data = live_get(f"/transactions/{tx_id}", {"expand[]": "merchant"})
        assert data["transaction"]["id"] == tx_id
