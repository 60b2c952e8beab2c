"""
Reputation gateway Python client.

Uses httpx. One method per gateway route; the caller's key travels in the JSON
body of every request, GET routes included.

Usage:
    from reputation_gateway.client import GatewayClient
    client = GatewayClient("http://localhost:8080")
    cid = client.add_trust_relation(key, "0xabc...", tier=2)
"""

from __future__ import annotations

from typing import Any

import httpx

from reputation_gateway.sdk.client import Tier


class GatewayClientError(Exception):
    """Raised when the gateway returns an error response."""

    def __init__(self, message: str, status_code: int | None = None, response: httpx.Response | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class GatewayClient:
    """Client for the reputation gateway API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout: float = 30.0,
        http: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = http or httpx.Client(base_url=self.base_url, timeout=timeout)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "GatewayClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> Any:
        resp = self._http.request(method, path, json=json)
        if resp.is_error:
            is_json = resp.headers.get("content-type", "").startswith("application/json")
            detail = resp.json().get("detail", resp.text) if is_json else resp.text
            raise GatewayClientError(
                f"API error: {detail}",
                status_code=resp.status_code,
                response=resp,
            )
        return resp.json()

    def health(self) -> dict[str, str]:
        """Liveness probe."""
        return self._request("GET", "/health")

    def get_trust_relations(self, key: str) -> list[Any]:
        """Trust relations stored for the address derived from key."""
        return self._request("GET", "/relation", json={"key": key})

    def add_trust_relation(self, key: str, value: str, tier: Tier) -> Any:
        """Add a trust relation; returns its content identifier."""
        return self._request("POST", "/relation", json={"key": key, "value": value, "tier": tier})

    def get_customer_list(self, key: str) -> list[Any]:
        return self._request("GET", "/customers", json={"key": key})

    def request_decryption(self, key: str, locksmith: str, tier: Tier) -> Any:
        return self._request(
            "POST", "/request-decrypt", json={"key": key, "locksmith": locksmith, "tier": tier}
        )

    def approve_request(self, key: str, customer: str) -> Any:
        return self._request("POST", "/approve-request", json={"key": key, "customer": customer})

    def get_decrypted_trust_relation(self, key: str, locksmith: str, tier: Tier) -> list[Any]:
        """Decrypted relations of locksmith at tier, once the request was approved."""
        return self._request(
            "POST",
            "/get-decrypted-relations",
            json={"key": key, "locksmith": locksmith, "tier": tier},
        )


# -----------------------------------------------------------------------------
# Example usage
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    import os

    with GatewayClient(os.getenv("GATEWAY_URL", "http://localhost:8080")) as client:
        print("Health:", client.health())
        locksmith_key = os.environ["LOCKSMITH_KEY"]
        try:
            print("Customers:", client.get_customer_list(locksmith_key))
        except GatewayClientError as e:
            if e.status_code == 503:
                print("Gateway has no SDK client factory configured")
            else:
                raise
