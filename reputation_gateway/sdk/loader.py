"""
Resolve the configured client factory and build per-request SDK clients.
"""

from __future__ import annotations

import importlib
import inspect
import time

from reputation_gateway.core.exceptions import ConfigError
from reputation_gateway.gateway_logging import get_logger
from reputation_gateway.sdk.client import ClientFactory, ReputationClient

logger = get_logger(__name__)


def load_client_factory(path: str) -> ClientFactory:
    """
    Import a factory from "package.module:attr".

    attr may be dotted to reach a class method, e.g.
    "emergent_reputation:EmergentReputation.create".
    Raises ConfigError when the path is malformed, the import fails,
    or the target is not callable.
    """
    path = (path or "").strip()
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigError(f"Client factory must look like 'module:attr', got {path!r}")
    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import client factory module {module_name!r}: {e}") from e
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ConfigError(f"Client factory {path!r} not found: no attribute {part!r}") from e
    if not callable(target):
        raise ConfigError(f"Client factory {path!r} is not callable")
    logger.info("client_factory_loaded", factory=path)
    return target


async def create_client(
    factory: ClientFactory,
    secret_key: str | None,
    contract_address: str,
) -> ReputationClient:
    """Create one SDK client for one request. The secret key is never logged."""
    t0 = time.perf_counter()
    client = factory(secret_key, contract_address)
    if inspect.isawaitable(client):
        client = await client
    logger.debug(
        "sdk_client_created",
        contract_address=contract_address,
        duration_ms=round((time.perf_counter() - t0) * 1000, 2),
    )
    return client
