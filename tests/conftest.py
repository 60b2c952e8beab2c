"""
Pytest fixtures for gateway tests. A recording fake stands in for the reputation SDK.
"""

from __future__ import annotations

from typing import Any

import pytest

CONTRACT_ADDRESS = "0xEa4Df49aEe4bB81EcDE7dB26dD638F2B6DfCC961"
LOCKSMITH_KEY = "0e10373c761cbe50eafe9798cb8df4ed9edeb13c1396684daa0f8eefd6022abc"
OWN_ADDRESS = "0x1111111111111111111111111111111111111111"


class FakeReputationClient:
    """Records every SDK call into a shared log and returns canned results."""

    def __init__(self, sdk: "FakeSDK", secret_key: str | None, contract_address: str):
        self.sdk = sdk
        self.secret_key = secret_key
        self.contract_address = contract_address

    def _record(self, method: str, *args: Any) -> Any:
        self.sdk.calls.append((method, *args))
        result = self.sdk.results.get(method)
        if isinstance(result, Exception):
            raise result
        return result

    def get_address(self) -> str:
        return OWN_ADDRESS

    async def get_trust_relations(self, address):
        return self._record("get_trust_relations", address)

    async def add_trust_relation(self, value, tier):
        return self._record("add_trust_relation", value, tier)

    async def get_customer_list(self):
        return self._record("get_customer_list")

    async def request_decryption(self, locksmith, tier):
        return self._record("request_decryption", locksmith, tier)

    async def approve_request(self, customer):
        return self._record("approve_request", customer)

    async def get_decrypted_trust_relation(self, locksmith, tier):
        return self._record("get_decrypted_trust_relation", locksmith, tier)


class FakeSDK:
    """Async client factory (EmergentReputation.create equivalent) plus call log."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.results: dict[str, Any] = {}
        self.clients: list[FakeReputationClient] = []
        self.create_error: Exception | None = None

    async def create(self, secret_key: str | None, contract_address: str) -> FakeReputationClient:
        self.calls.append(("create", secret_key, contract_address))
        if self.create_error is not None:
            raise self.create_error
        client = FakeReputationClient(self, secret_key, contract_address)
        self.clients.append(client)
        return client


@pytest.fixture
def fake_sdk() -> FakeSDK:
    return FakeSDK()


@pytest.fixture
def settings():
    from reputation_gateway.config.settings import Settings

    return Settings(contract_address=CONTRACT_ADDRESS)


@pytest.fixture
def app(settings, fake_sdk):
    from reputation_gateway.api_server.server import create_app

    return create_app(settings, client_factory=fake_sdk.create)


@pytest.fixture
def client(app):
    """FastAPI TestClient. Server errors become 500 responses instead of raising."""
    from fastapi.testclient import TestClient

    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def validating_client(fake_sdk):
    """TestClient for an app with VALIDATE_REQUIRED_FIELDS on."""
    from fastapi.testclient import TestClient

    from reputation_gateway.api_server.server import create_app
    from reputation_gateway.config.settings import Settings

    settings = Settings(contract_address=CONTRACT_ADDRESS, validate_required_fields=True)
    return TestClient(create_app(settings, client_factory=fake_sdk.create), raise_server_exceptions=False)
