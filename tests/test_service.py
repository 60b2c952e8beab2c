"""
Pytest tests for ReputationService, driven directly without an HTTP listener.
"""

from __future__ import annotations

import asyncio

import pytest

from reputation_gateway.api_server.schemas import (
    ApproveRequest,
    DecryptionRequest,
    KeyRequest,
    TrustRelationRequest,
)
from reputation_gateway.core.exceptions import ClientFactoryNotConfigured, MissingFieldError
from reputation_gateway.service import ReputationService
from tests.conftest import CONTRACT_ADDRESS, FakeReputationClient


@pytest.fixture
def service(fake_sdk):
    return ReputationService(fake_sdk.create, CONTRACT_ADDRESS)


def test_add_trust_relation_order(service, fake_sdk):
    """Client creation happens first, then exactly one SDK call."""
    fake_sdk.results["add_trust_relation"] = "cid123"
    result = asyncio.run(service.add_trust_relation(TrustRelationRequest(key="k1", value="addr2", tier=2)))
    assert result == "cid123"
    assert fake_sdk.calls == [
        ("create", "k1", CONTRACT_ADDRESS),
        ("add_trust_relation", "addr2", 2),
    ]


def test_result_is_returned_unchanged(service, fake_sdk):
    payload = [{"locksmith": "0xlock", "relations": [{"to": "0xa", "tier": 1}]}]
    fake_sdk.results["get_decrypted_trust_relation"] = payload
    result = asyncio.run(
        service.get_decrypted_trust_relation(DecryptionRequest(key="c1", locksmith="0xlock", tier=1))
    )
    assert result is payload


def test_concurrent_requests_use_independent_clients(service, fake_sdk):
    """Concurrent calls on different routes each create their own client."""
    fake_sdk.results.update(
        get_customer_list=["a"],
        approve_request="tx",
        request_decryption="tx2",
    )

    async def run_all():
        return await asyncio.gather(
            service.get_customer_list(KeyRequest(key="l1")),
            service.approve_request(ApproveRequest(key="l2", customer="0xc")),
            service.request_decryption(DecryptionRequest(key="c1", locksmith="0xl", tier=2)),
        )

    results = asyncio.run(run_all())
    assert results == [["a"], "tx", "tx2"]
    assert len(fake_sdk.clients) == 3
    assert len({id(c) for c in fake_sdk.clients}) == 3
    assert sorted(c.secret_key for c in fake_sdk.clients) == ["c1", "l1", "l2"]


def test_missing_fields_raise_when_validating(fake_sdk):
    service = ReputationService(fake_sdk.create, CONTRACT_ADDRESS, validate_required_fields=True)
    with pytest.raises(MissingFieldError) as exc_info:
        asyncio.run(service.request_decryption(DecryptionRequest(key="c1")))
    assert exc_info.value.missing == ["locksmith", "tier"]
    assert fake_sdk.calls == []


def test_missing_fields_forwarded_by_default(service, fake_sdk):
    asyncio.run(service.add_trust_relation(TrustRelationRequest()))
    assert fake_sdk.calls == [
        ("create", None, CONTRACT_ADDRESS),
        ("add_trust_relation", None, None),
    ]


def test_no_factory(fake_sdk):
    service = ReputationService(None, CONTRACT_ADDRESS)
    with pytest.raises(ClientFactoryNotConfigured):
        asyncio.run(service.get_customer_list(KeyRequest(key="k1")))


def test_sdk_error_propagates_unchanged(service, fake_sdk):
    err = RuntimeError("execution reverted")
    fake_sdk.results["approve_request"] = err
    with pytest.raises(RuntimeError) as exc_info:
        asyncio.run(service.approve_request(ApproveRequest(key="l1", customer="0xc")))
    assert exc_info.value is err


def test_sync_factory_accepted(fake_sdk):
    """A factory that returns the client directly (not awaitable) also works."""

    def factory(secret_key, contract_address):
        fake_sdk.calls.append(("create", secret_key, contract_address))
        return FakeReputationClient(fake_sdk, secret_key, contract_address)

    fake_sdk.results["get_customer_list"] = ["x"]
    service = ReputationService(factory, CONTRACT_ADDRESS)
    assert asyncio.run(service.get_customer_list(KeyRequest(key="k1"))) == ["x"]
    assert fake_sdk.calls == [("create", "k1", CONTRACT_ADDRESS), ("get_customer_list",)]
