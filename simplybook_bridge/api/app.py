"""
FastAPI application factory and configuration.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..config import Settings, get_settings
from ..services import SchedulingClient
from ..utils.logging import configure_logging, get_logger
from .handlers import HealthHandler, SchedulingHandler
from .responses import failure

logger = get_logger("bridge.app")


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[SchedulingClient] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    settings.warn_about_defaults(logger)

    client = client or SchedulingClient.from_settings(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Booking widget backend for the SimplyBook API",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.client = client

    @app.exception_handler(RequestValidationError)
    async def invalid_input(request: Request, exc: RequestValidationError):
        return failure("Invalid input", 400, errors=exc.errors())

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception):
        logger.exception(f"unhandled error on {request.url.path}")
        return failure("Something went wrong. Please try again.", 500)

    # Initialize handlers
    health_handler = HealthHandler(client)
    scheduling_handler = SchedulingHandler(client)

    # Register routes
    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(scheduling_handler.router, prefix="/api", tags=["scheduling"])

    return app
