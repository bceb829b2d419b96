"""Configuration and paths for the Monzo MCP server."""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data files
TOKEN_FILE = PROJECT_ROOT / ".monzo_token.json"
ENV_SECRETS_FILE = PROJECT_ROOT / ".env.secrets"

# API
API_URL = "https://api.monzo.com"
TOKEN_ENV_VAR = "MONZO_ACCESS_TOKEN"

# Server
SERVER_NAME = "monzo-api"
SERVER_VERSION = "1.0.0"
LOG_LEVEL = os.environ.get("MONZO_LOG_LEVEL", "INFO").upper()
