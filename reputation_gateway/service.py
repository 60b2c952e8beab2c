"""
Relay service: one SDK call per gateway route.

Every operation takes a parsed request body, builds a fresh SDK client from the
body's key and the configured contract address, awaits exactly one client
method and returns its value untouched. No state is kept between calls, so
concurrent requests never share a client.

Independent of FastAPI: the API routes are thin wrappers, and tests drive the
service directly with a fake client factory.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable

from reputation_gateway.api_server.schemas import (
    ApproveRequest,
    DecryptionRequest,
    GatewayRequest,
    KeyRequest,
    TrustRelationRequest,
)
from reputation_gateway.core.exceptions import ClientFactoryNotConfigured, MissingFieldError
from reputation_gateway.gateway_logging import get_logger
from reputation_gateway.sdk.client import ClientFactory, ReputationClient
from reputation_gateway.sdk.loader import create_client

logger = get_logger(__name__)


class ReputationService:
    """Forward gateway requests to the reputation SDK."""

    def __init__(
        self,
        client_factory: ClientFactory | None,
        contract_address: str,
        validate_required_fields: bool = False,
    ):
        self.client_factory = client_factory
        self.contract_address = contract_address
        self.validate_required_fields = validate_required_fields

    async def _relay(
        self,
        route: str,
        body: GatewayRequest,
        call: Callable[[ReputationClient], Awaitable[Any]],
    ) -> Any:
        if self.client_factory is None:
            raise ClientFactoryNotConfigured()
        if self.validate_required_fields:
            missing = body.missing_fields()
            if missing:
                logger.warning("request_missing_fields", route=route, missing=missing)
                raise MissingFieldError(route, missing)

        t0 = time.perf_counter()
        try:
            client = await create_client(self.client_factory, body.key, self.contract_address)
            result = await call(client)
        except Exception as e:
            # SDK errors are not classified; log and let the host turn them into a 500
            logger.error("sdk_call_failed", route=route, error_type=type(e).__name__, error=str(e))
            raise
        logger.info(
            "sdk_call_completed",
            route=route,
            duration_ms=round((time.perf_counter() - t0) * 1000, 2),
        )
        return result

    async def get_trust_relations(self, body: KeyRequest) -> Any:
        """GET /relation: relations stored by the caller's own address."""

        async def call(client: ReputationClient) -> Any:
            return await client.get_trust_relations(client.get_address())

        return await self._relay("GET /relation", body, call)

    async def add_trust_relation(self, body: TrustRelationRequest) -> Any:
        """POST /relation: returns the content identifier of the new relation."""
        return await self._relay(
            "POST /relation",
            body,
            lambda client: client.add_trust_relation(body.value, body.tier),
        )

    async def get_customer_list(self, body: KeyRequest) -> Any:
        return await self._relay(
            "GET /customers",
            body,
            lambda client: client.get_customer_list(),
        )

    async def request_decryption(self, body: DecryptionRequest) -> Any:
        """POST /request-decrypt: customer asks a locksmith to decrypt relations of a tier."""
        return await self._relay(
            "POST /request-decrypt",
            body,
            lambda client: client.request_decryption(body.locksmith, body.tier),
        )

    async def approve_request(self, body: ApproveRequest) -> Any:
        """POST /approve-request: locksmith approves a customer's pending request."""
        return await self._relay(
            "POST /approve-request",
            body,
            lambda client: client.approve_request(body.customer),
        )

    async def get_decrypted_trust_relation(self, body: DecryptionRequest) -> Any:
        return await self._relay(
            "POST /get-decrypted-relations",
            body,
            lambda client: client.get_decrypted_trust_relation(body.locksmith, body.tier),
        )
