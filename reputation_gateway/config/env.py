"""
Environment variable loading for the reputation gateway.

- CONTRACT_ADDRESS: reputation contract the SDK clients are bound to
- REPUTATION_CLIENT_FACTORY: "package.module:attr" of the async SDK client factory
- API_HOST / API_PORT: uvicorn bind address
- VALIDATE_REQUIRED_FIELDS: reject bodies missing route fields with 422 instead of forwarding None
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is reputation_gateway/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_CONTRACT_ADDRESS = "0xEa4Df49aEe4bB81EcDE7dB26dD638F2B6DfCC961"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8080

_TRUTHY = ("1", "true", "yes", "on")


def load_gateway_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    load_dotenv(_ENV_PATH, override=False)


def get_contract_address() -> str:
    """Return CONTRACT_ADDRESS from env, or the default deployment address."""
    load_gateway_env()
    return (os.getenv("CONTRACT_ADDRESS") or "").strip() or DEFAULT_CONTRACT_ADDRESS


def get_client_factory_path() -> str | None:
    """Return REPUTATION_CLIENT_FACTORY ("module:attr") or None when unset."""
    load_gateway_env()
    raw = (os.getenv("REPUTATION_CLIENT_FACTORY") or "").strip()
    return raw or None


def get_api_host() -> str:
    load_gateway_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    """Return API_PORT as int. Invalid values fall back to the default with no error."""
    load_gateway_env()
    raw = (os.getenv("API_PORT") or "").strip()
    try:
        return int(raw) if raw else DEFAULT_API_PORT
    except ValueError:
        return DEFAULT_API_PORT


def validate_required_fields() -> bool:
    """
    Return True when VALIDATE_REQUIRED_FIELDS is set.

    Off by default: absent body fields reach the SDK as None, like the
    original service. On: such requests get 422 and the SDK is not called.
    """
    load_gateway_env()
    return (os.getenv("VALIDATE_REQUIRED_FIELDS") or "").strip().lower() in _TRUTHY
