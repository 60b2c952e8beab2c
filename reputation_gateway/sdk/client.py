"""
Interface of the Emergent Reputation SDK client as consumed by the gateway.

Return values are opaque: the gateway serializes whatever the SDK returns.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable

# Security level (numeric level or symbolic name). Never coerced: the SDK sees
# exactly the JSON value the caller sent.
Tier = Any


@runtime_checkable
class ReputationClient(Protocol):
    """Client scoped to one secret key and one contract address."""

    def get_address(self) -> str: ...

    async def get_trust_relations(self, address: str) -> list[Any]: ...

    async def add_trust_relation(self, value: str, tier: Tier) -> Any: ...

    async def get_customer_list(self) -> list[Any]: ...

    async def request_decryption(self, locksmith: str, tier: Tier) -> Any: ...

    async def approve_request(self, customer: str) -> Any: ...

    async def get_decrypted_trust_relation(self, locksmith: str, tier: Tier) -> list[Any]: ...


# create(secret_key, contract_address) -> client; may also return the client directly
ClientFactory = Callable[[str, str], Union[Awaitable[ReputationClient], ReputationClient]]
