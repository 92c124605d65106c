"""Products service main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from products_service.api.health import router as health_router
from products_service.api.middleware import error_response, setup_middleware
from products_service.api.products import router as products_router
from products_service.domain.exceptions import CatalogError
from products_service.infrastructure.config import Settings, settings as default_settings
from products_service.infrastructure.database import Database
from products_service.infrastructure.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Connects the product store once and keeps the handle on ``app.state``.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    settings: Settings = app.state.settings

    logger.info(
        "Starting products service",
        version=settings.api_version,
        debug=settings.debug,
    )

    database = Database(settings.database_url, echo=settings.debug)
    await database.connect(create_tables=settings.create_tables)
    app.state.database = database

    yield

    logger.info("Shutting down products service")
    await database.disconnect()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use; defaults to the environment.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level, json=settings.log_json)

    app = FastAPI(
        title="Products Service",
        description="Product catalog microservice",
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    setup_middleware(app)

    app.include_router(health_router, tags=["Health"])
    app.include_router(products_router)

    register_exception_handlers(app)

    return app


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def register_exception_handlers(app: FastAPI) -> None:
    """Map errors to the standard error envelope."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        """Handle catalog errors with their mapped status."""
        return error_response(
            request,
            exc.status,
            exc.kind.value,
            exc.message,
            [exc.details] if exc.details else [],
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed requests as bad requests."""
        details = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        return error_response(request, 400, "VALIDATION_ERROR", "Invalid request", details)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        """Handle HTTP exceptions with consistent format."""
        return error_response(request, exc.status_code, "ERROR", str(exc.detail))


app = create_app()
