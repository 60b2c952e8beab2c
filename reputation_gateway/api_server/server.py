"""
FastAPI server — gateway routes, health probe and error mapping.

create_app() wires configuration into the app: the contract address and the SDK
client factory are resolved once and held by an app-scoped ReputationService.
SDK errors have no handler here; they surface as the host's default 500.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from reputation_gateway import __version__
from reputation_gateway.api_server.middleware import RequestLoggingMiddleware
from reputation_gateway.api_server.routes import router as reputation_router
from reputation_gateway.config import Settings, get_settings
from reputation_gateway.core.exceptions import ClientFactoryNotConfigured, MissingFieldError
from reputation_gateway.gateway_logging import get_logger
from reputation_gateway.sdk.client import ClientFactory
from reputation_gateway.sdk.loader import load_client_factory
from reputation_gateway.service import ReputationService

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    client_factory: ClientFactory | None = None,
) -> FastAPI:
    """
    Build the gateway app.

    client_factory overrides settings.client_factory_path. With neither, the app
    still starts; SDK routes answer 503 until a factory is configured.
    Raises ConfigError if the configured factory path cannot be loaded.
    """
    settings = settings or get_settings()
    if client_factory is None and settings.client_factory_path:
        client_factory = load_client_factory(settings.client_factory_path)
    if client_factory is None:
        logger.warning("client_factory_missing", need="REPUTATION_CLIENT_FACTORY")

    app = FastAPI(title="Reputation Gateway", version=__version__)
    app.state.settings = settings
    app.state.service = ReputationService(
        client_factory,
        settings.contract_address,
        validate_required_fields=settings.validate_required_fields,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(reputation_router)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Liveness probe: API is up."""
        return {"status": "ok", "contract_address": settings.contract_address}

    @app.exception_handler(HTTPException)
    def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        """Consistent JSON error response for HTTPException."""
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(MissingFieldError)
    def missing_field_handler(request: Request, exc: MissingFieldError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc), "missing": exc.missing})

    @app.exception_handler(ClientFactoryNotConfigured)
    def factory_missing_handler(request: Request, exc: ClientFactoryNotConfigured) -> JSONResponse:
        logger.error("client_factory_not_configured", path=request.url.path)
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    logger.info(
        "gateway_app_created",
        contract_address=settings.contract_address,
        validate_required_fields=settings.validate_required_fields,
        client_factory_configured=client_factory is not None,
    )
    return app


def describe_app(app: FastAPI) -> dict[str, Any]:
    """Routes served by app as {path: [methods]}; used by the startup banner."""
    routes: dict[str, list[str]] = {}
    for route in app.routes:
        methods = getattr(route, "methods", None)
        if not methods:
            continue
        routes.setdefault(route.path, []).extend(sorted(m for m in methods if m != "HEAD"))
    return routes
