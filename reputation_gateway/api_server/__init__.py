"""
API server package — HTTP interface of the reputation gateway.

Six routes forward JSON bodies to the reputation SDK through the relay
service; /health reports liveness.
"""
