"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error responder middleware (the terminal error boundary)
- Logging configuration

No business logic here.
"""

from typing import Optional

from fastapi import FastAPI
from starlette.types import Receive, Scope, Send

from faultline.core.config import Settings, settings
from faultline.domain.responding.errors import RouteNotFoundError
from faultline.interfaces.health import router as health_router
from faultline.interfaces.responding.dependencies import get_error_body_builder
from faultline.interfaces.responding.handlers import register_error_handlers
from faultline.interfaces.responding.middleware import ErrorResponderMiddleware
from faultline.shared.logging import configure_logging


async def route_not_found(scope: Scope, receive: Receive, send: Send) -> None:
    """Router fallback. Lets the error responder build the 404."""
    raise RouteNotFoundError(scope.get("method", ""), scope.get("path", ""))


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Framework exception handlers re-raise so that every error,
    HTTPException included, reaches ErrorResponderMiddleware.

    Args:
        config: Settings to use. Defaults to the process-wide settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    config = config or settings
    configure_logging(level=config.log_level, access_log=config.access_log)

    app = FastAPI(
        title=config.project_name,
        version=config.version,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    # --- Error Handling ---
    register_error_handlers(app)
    app.router.default = route_not_found
    app.add_middleware(
        ErrorResponderMiddleware, body_builder=get_error_body_builder(config)
    )

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")

    return app


app = create_app()
