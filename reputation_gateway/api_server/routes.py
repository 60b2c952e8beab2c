"""
API route definitions.

Each route parses its body, hands it to ReputationService and returns the SDK
result as JSON. GET routes read a JSON body as well. A request without a body
is relayed like an empty object, so its fields reach the SDK as None.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from reputation_gateway.api_server.schemas import (
    ApproveRequest,
    DecryptionRequest,
    KeyRequest,
    TrustRelationRequest,
)
from reputation_gateway.service import ReputationService

router = APIRouter(tags=["reputation"])


def get_service(request: Request) -> ReputationService:
    """Dependency: the app-scoped relay service built by create_app()."""
    return request.app.state.service


def _hex_bytes(raw: bytes) -> str:
    return "0x" + bytes(raw).hex()


def sdk_response(result: Any) -> JSONResponse:
    """Serialize an SDK value unchanged; bytes (tx hashes) become 0x-hex strings."""
    return JSONResponse(content=jsonable_encoder(result, custom_encoder={bytes: _hex_bytes}))




@router.get("/relation")
async def get_relations(
    body: Optional[KeyRequest] = None,
    service: ReputationService = Depends(get_service),
) -> JSONResponse:
    """Trust relations stored for the caller's own address."""
    return sdk_response(await service.get_trust_relations(body or KeyRequest()))


@router.post("/relation")
async def add_relation(
    body: Optional[TrustRelationRequest] = None,
    service: ReputationService = Depends(get_service),
) -> JSONResponse:
    """Add a trust relation; responds with its content identifier."""
    return sdk_response(await service.add_trust_relation(body or TrustRelationRequest()))


@router.get("/customers")
async def get_customers(
    body: Optional[KeyRequest] = None,
    service: ReputationService = Depends(get_service),
) -> JSONResponse:
    return sdk_response(await service.get_customer_list(body or KeyRequest()))


@router.post("/request-decrypt")
async def request_decrypt(
    body: Optional[DecryptionRequest] = None,
    service: ReputationService = Depends(get_service),
) -> JSONResponse:
    """Customer requests decryption of a locksmith's relations; responds with the tx handle."""
    return sdk_response(await service.request_decryption(body or DecryptionRequest()))


@router.post("/approve-request")
async def approve_request(
    body: Optional[ApproveRequest] = None,
    service: ReputationService = Depends(get_service),
) -> JSONResponse:
    return sdk_response(await service.approve_request(body or ApproveRequest()))


@router.post("/get-decrypted-relations")
async def get_decrypted_relations(
    body: Optional[DecryptionRequest] = None,
    service: ReputationService = Depends(get_service),
) -> JSONResponse:
    """Decrypted relations the locksmith approved for this customer."""
    return sdk_response(await service.get_decrypted_trust_relation(body or DecryptionRequest()))
