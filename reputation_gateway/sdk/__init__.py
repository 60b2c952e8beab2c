"""
Reputation SDK seam.

The gateway never implements trust-relation logic itself. It talks to an
externally supplied client that follows ReputationClient, created per request
by a ClientFactory named in configuration.
"""

from reputation_gateway.sdk.client import ClientFactory, ReputationClient
from reputation_gateway.sdk.loader import create_client, load_client_factory

__all__ = [
    "ClientFactory",
    "ReputationClient",
    "create_client",
    "load_client_factory",
]
