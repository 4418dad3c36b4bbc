"""
Framework exception handlers.

Starlette converts HTTPException and validation errors into responses
before they reach any middleware. These handlers re-raise instead, so
that ErrorResponderMiddleware remains the only place where errors
become responses.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from faultline.domain.responding.errors import AbortError

HTTP_422 = 422


def register_error_handlers(app: FastAPI) -> None:
    """Route framework errors to the error responder.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(StarletteHTTPException)
    async def propagate_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> None:
        """Re-raise; the capability query reads status_code and detail."""
        raise exc

    @app.exception_handler(RequestValidationError)
    async def propagate_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> None:
        """Re-raise as a 422 abort carrying the validation errors."""
        raise AbortError(
            HTTP_422, metadata={"errors": jsonable_encoder(exc.errors())}
        ) from exc
