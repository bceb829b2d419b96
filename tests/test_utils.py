"""Tests for utils.py token and secrets loading."""

import asyncio
import json
import os

import pytest
from pytest_mock import MockerFixture

from monzo_mcp.src.client import MonzoClient
from monzo_mcp.src.utils import (
    MissingTokenError,
    load_env_secrets,
    load_token,
    monzo_client,
    token_source,
)


@pytest.fixture
def token_file(tmp_path, mocker: MockerFixture):
    """Point TOKEN_FILE at a temp path that does not exist yet."""
    path = tmp_path / ".monzo_token.json"
    mocker.patch("monzo_mcp.src.utils.TOKEN_FILE", path)
    return path


@pytest.fixture
def no_env_token(monkeypatch):
    """Remove MONZO_ACCESS_TOKEN from the environment."""
    monkeypatch.delenv("MONZO_ACCESS_TOKEN", raising=False)


class TestLoadToken:
    """Tests for load_token and token_source."""

    def test_env_wins(self, token_file, monkeypatch):
        """Test the environment variable takes priority over the file."""
        token_file.write_text(json.dumps({"access_token": "from-file"}))
        monkeypatch.setenv("MONZO_ACCESS_TOKEN", "from-env")

        assert load_token() == "from-env"
        assert token_source() == "env"

    def test_falls_back_to_file(self, token_file, no_env_token):
        """Test the token file is used when the env var is unset."""
        token_file.write_text(json.dumps({"access_token": "from-file", "expires_in": 3600}))

        assert load_token() == "from-file"
        assert token_source() == "file"

    def test_missing_token(self, token_file, no_env_token):
        """Test a clear error when no token is available."""
        assert token_source() is None
        with pytest.raises(MissingTokenError, match="MONZO_ACCESS_TOKEN"):
            load_token()

    def test_missing_token_is_file_not_found(self):
        """Test callers catching FileNotFoundError still see it."""
        assert issubclass(MissingTokenError, FileNotFoundError)


class TestLoadEnvSecrets:
    """Tests for load_env_secrets."""

    def test_loads_without_overriding(self, tmp_path, mocker: MockerFixture, monkeypatch):
        """Test values are loaded, comments skipped and existing vars kept."""
        secrets = tmp_path / ".env.secrets"
        secrets.write_text(
            "# comment\n"
            "MONZO_TEST_NEW = new-value\n"
            "\n"
            "MONZO_TEST_EXISTING=from-file\n"
            "not a pair\n"
        )
        mocker.patch("monzo_mcp.src.utils.ENV_SECRETS_FILE", secrets)
        monkeypatch.delenv("MONZO_TEST_NEW", raising=False)
        monkeypatch.setenv("MONZO_TEST_EXISTING", "from-env")

        load_env_secrets()

        assert os.environ["MONZO_TEST_NEW"] == "new-value"
        assert os.environ["MONZO_TEST_EXISTING"] == "from-env"
        monkeypatch.delenv("MONZO_TEST_NEW")

    def test_missing_file_is_ignored(self, tmp_path, mocker: MockerFixture):
        """Test nothing happens when the file does not exist."""
        mocker.patch("monzo_mcp.src.utils.ENV_SECRETS_FILE", tmp_path / "missing")
        load_env_secrets()


class TestMonzoClientContext:
    """Tests for the monzo_client context manager."""

    def test_closes_client(self, mocker: MockerFixture):
        """Test the client is closed on exit."""
        aclose = mocker.patch.object(MonzoClient, "aclose")

        async def use_client():
            async with monzo_client("tok") as client:
                assert isinstance(client, MonzoClient)

        asyncio.run(use_client())

        aclose.assert_awaited_once()
