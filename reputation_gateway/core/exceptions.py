"""
Application-level exceptions.

Only failures the gateway itself detects live here. Errors raised by the
reputation SDK are never wrapped; they propagate to the host unchanged.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base class for errors raised by the gateway."""


class ConfigError(GatewayError):
    """Invalid or incomplete configuration (contract address, client factory path)."""


class ClientFactoryNotConfigured(ConfigError):
    """A route was called but no SDK client factory is configured."""

    def __init__(self, env_var: str = "REPUTATION_CLIENT_FACTORY"):
        super().__init__(f"Server misconfiguration: {env_var} required")
        self.env_var = env_var


class MissingFieldError(GatewayError):
    """Request body lacks fields the route needs before the SDK can be called."""

    def __init__(self, route: str, missing: list[str]):
        super().__init__(f"{route}: missing required field(s): {', '.join(missing)}")
        self.route = route
        self.missing = list(missing)
