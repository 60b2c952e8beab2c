"""
Structured logging for the reputation gateway.

JSON logs with timestamp, event_type, level and logger name.
Use get_logger() in every module.
"""

from reputation_gateway.gateway_logging.logger import bind_request, get_logger

__all__ = ["bind_request", "get_logger"]
