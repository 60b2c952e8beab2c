"""
Application settings.

Settings are read once from the environment (see config.env), validated, and
cached. The API server receives them explicitly; nothing reads os.environ at
request time.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from web3 import Web3

from reputation_gateway.config import env
from reputation_gateway.core.exceptions import ConfigError


@dataclass(frozen=True)
class Settings:
    """Process-wide read-only configuration."""

    contract_address: str
    client_factory_path: str | None = None
    api_host: str = env.DEFAULT_API_HOST
    api_port: int = env.DEFAULT_API_PORT
    validate_required_fields: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "contract_address", normalize_contract_address(self.contract_address))


def normalize_contract_address(address: str) -> str:
    """Validate an EVM address and return its checksummed form. Raises ConfigError."""
    address = (address or "").strip()
    if not address:
        raise ConfigError("CONTRACT_ADDRESS must be non-empty")
    # Checksum casing of the input is not enforced; the output is always checksummed.
    lowered = address.lower()
    if not Web3.is_address(lowered):
        raise ConfigError(f"Invalid contract address: {address!r}")
    return Web3.to_checksum_address(lowered)


def load_settings() -> Settings:
    """Build Settings from the current environment (no caching)."""
    return Settings(
        contract_address=env.get_contract_address(),
        client_factory_path=env.get_client_factory_path(),
        api_host=env.get_api_host(),
        api_port=env.get_api_port(),
        validate_required_fields=env.validate_required_fields(),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process settings, loaded on first call."""
    return load_settings()
