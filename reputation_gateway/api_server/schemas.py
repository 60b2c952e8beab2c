"""
Request bodies for the gateway routes.

Every field is optional and untyped at parse time: values reach the SDK exactly
as the caller sent them, and a wrong type surfaces as an SDK failure. Each model
lists the fields its route needs; the relay service only checks them when
VALIDATE_REQUIRED_FIELDS is on. Unknown fields are ignored.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from reputation_gateway.sdk.client import Tier


class GatewayRequest(BaseModel):
    """Base body: every route carries the caller's secret key."""

    model_config = ConfigDict(extra="ignore")

    required_fields: ClassVar[tuple[str, ...]] = ("key",)

    key: Any = Field(None, description="Caller's private key; used for this request only")

    def missing_fields(self) -> list[str]:
        """Required fields that are absent or null, in declaration order."""
        return [name for name in self.required_fields if getattr(self, name) is None]


class KeyRequest(GatewayRequest):
    """GET /relation, GET /customers body."""


class TrustRelationRequest(GatewayRequest):
    """POST /relation body."""

    required_fields: ClassVar[tuple[str, ...]] = ("key", "value", "tier")

    value: Any = Field(None, description="Counterparty address the relation points to")
    tier: Tier = Field(None, description="Security level, passed verbatim to the SDK")


class DecryptionRequest(GatewayRequest):
    """POST /request-decrypt, POST /get-decrypted-relations body."""

    required_fields: ClassVar[tuple[str, ...]] = ("key", "locksmith", "tier")

    locksmith: Any = Field(None, description="Locksmith address holding the relations")
    tier: Tier = Field(None, description="Security level, passed verbatim to the SDK")


class ApproveRequest(GatewayRequest):
    """POST /approve-request body."""

    required_fields: ClassVar[tuple[str, ...]] = ("key", "customer")

    customer: Any = Field(None, description="Customer whose decryption request is approved")
