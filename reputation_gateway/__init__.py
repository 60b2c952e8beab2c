"""
Reputation Gateway — HTTP façade over the Emergent Reputation SDK.

Each request builds an SDK client from the caller's key and the configured
contract address, performs one SDK call, and returns the result as JSON.
"""

__version__ = "0.1.0"
