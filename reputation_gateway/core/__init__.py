"""
Core utilities — exceptions shared by the config layer, the SDK seam and the API server.
"""

from reputation_gateway.core.exceptions import (
    ClientFactoryNotConfigured,
    ConfigError,
    GatewayError,
    MissingFieldError,
)

__all__ = [
    "ClientFactoryNotConfigured",
    "ConfigError",
    "GatewayError",
    "MissingFieldError",
]
