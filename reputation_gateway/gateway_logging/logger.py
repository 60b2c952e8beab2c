"""
Structured logging for the gateway: one JSON object per line on stdout.

Every entry carries event_type, level, timestamp and logger, plus request_id
while a request is in flight. Fields that could hold a caller's private key
are redacted before rendering, whatever module logged them.

No reputation_gateway imports here; every other module imports this one.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

import structlog

# Field names that may carry the SDK secret; matched case-insensitively
SECRET_FIELDS = frozenset({"key", "secret_key", "private_key", "secret"})
REDACTED = "***"


def redact_secrets(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Replace secret-bearing fields with REDACTED."""
    for name in list(event_dict):
        if name.lower() in SECRET_FIELDS:
            event_dict[name] = REDACTED
    return event_dict


def configure_logging(level: str | None = None, fmt: str | None = None, stream: TextIO | None = None) -> None:
    """
    Configure structlog for the process.

    level: LOG_LEVEL name (default env LOG_LEVEL or INFO).
    fmt: "json" (default env LOG_FORMAT or json) or "console" for local runs.
    stream: output file, stdout by default.
    """
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    fmt = (fmt or os.getenv("LOG_FORMAT") or "json").strip().lower()

    renderer: Any
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            redact_secrets,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("event_type"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger bound to the module name.

        logger = get_logger(__name__)
        logger.info("sdk_call_completed", route="POST /relation", duration_ms=12.5)
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_request(request_id: str) -> None:
    """Start a fresh log context for one request, tagged with request_id."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)
