"""
Use case: Dispatch a request to the downstream handler.

Input: Request.
Output: Response.
Side effects: INFO log line per request; error logging on failure.
Failure cases: None. Any exception raised downstream becomes a response.

HEAD is handled as GET downstream (RFC 9110 §9.3.2) and the body is
dropped from the final response, error responses included.
"""

import logging
from dataclasses import replace
from typing import Optional, Union

from faultline.application.responding.build_error_body import (
    JSON_MEDIA_TYPE,
    ErrorBodyBuilder,
)
from faultline.application.responding.classify_error import reason_phrase
from faultline.application.responding.log_error import ErrorLogger
from faultline.domain.responding.entities import HTTPMethod, Request, Response
from faultline.domain.responding.ports import AsyncRequestHandler, RequestHandler

logger = logging.getLogger(__name__)

FALLBACK_STATUS = 500


class DispatchRequestUseCase:
    """Top-level request boundary. Never raises.

    Args:
        handler: Downstream handler, sync or async.
        body_builder: Builds error responses.
        error_logger: Logs handler failures.
        log: Logger for the per-request access line.
    """

    def __init__(
        self,
        handler: Union[RequestHandler, AsyncRequestHandler],
        body_builder: ErrorBodyBuilder,
        error_logger: Optional[ErrorLogger] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self._handler = handler
        self._body_builder = body_builder
        self._log = log or logger
        self._error_logger = error_logger or ErrorLogger(self._log)

    def respond(self, request: Request) -> Response:
        """Handle ``request`` with a synchronous downstream handler."""
        downstream = self._prepare(request)
        try:
            response = self._handler.handle(downstream)
        except Exception as exc:
            response = self._error_response(request, exc)
        return self._finalize(request, response)

    async def respond_async(self, request: Request) -> Response:
        """Handle ``request`` with an awaitable downstream handler."""
        downstream = self._prepare(request)
        try:
            response = await self._handler.handle(downstream)
        except Exception as exc:
            response = self._error_response(request, exc)
        return self._finalize(request, response)

    def _prepare(self, request: Request) -> Request:
        try:
            self._log.info("%s %s", request.verb, request.path)
        except Exception:  # noqa: BLE001
            pass

        if request.method is HTTPMethod.HEAD:
            return replace(request, method=HTTPMethod.GET)
        return request

    def _error_response(self, request: Request, error: Exception) -> Response:
        self._error_logger.log_error(error)
        try:
            return self._body_builder.build(error, request)
        except Exception:
            self._log.exception("Error response could not be built")
            return Response(
                status_code=FALLBACK_STATUS,
                body={"error": True, "reason": reason_phrase(FALLBACK_STATUS)},
                media_type=JSON_MEDIA_TYPE,
            )

    @staticmethod
    def _finalize(request: Request, response: Response) -> Response:
        if request.method is HTTPMethod.HEAD:
            response.body = b""
        return response
