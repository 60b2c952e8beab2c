"""
Main entrypoint: reputation gateway FastAPI server.

Env: CONTRACT_ADDRESS, REPUTATION_CLIENT_FACTORY, API_HOST, API_PORT,
VALIDATE_REQUIRED_FIELDS, LOG_LEVEL, LOG_FORMAT (see reputation_gateway.config.env).

Equivalent: uvicorn reputation_gateway.api_server.app:app --host 0.0.0.0 --port 8080
"""

import os
import sys

# Configure structured JSON logging before other imports that may log
from reputation_gateway.gateway_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Load settings, build the app and run it under uvicorn."""
    from reputation_gateway.config import get_settings
    from reputation_gateway.core.exceptions import ConfigError

    try:
        settings = get_settings()
        from reputation_gateway.api_server.server import create_app, describe_app

        app = create_app(settings)
    except ConfigError as e:
        logger.error("main_config_error", message=str(e))
        sys.exit(1)

    import uvicorn

    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        contract_address=settings.contract_address,
        routes=describe_app(app),
    )
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
