"""
Error responder middleware.

Runs every HTTP request through DispatchRequestUseCase so that any
exception raised by the application becomes a well-formed response:
HEAD is served as GET without a body, failures are logged, and the
error representation is negotiated against the Accept header.
"""

from typing import Optional, Union

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request as StarletteRequest
from starlette.responses import JSONResponse
from starlette.responses import Response as StarletteResponse
from starlette.types import ASGIApp

from faultline.application.responding.build_error_body import ErrorBodyBuilder
from faultline.application.responding.dispatch_request import DispatchRequestUseCase
from faultline.application.responding.log_error import ErrorLogger
from faultline.domain.responding.entities import HTTPMethod, Request, Response
from faultline.domain.responding.ports import AsyncRequestHandler
from faultline.infrastructure.responding.accept_negotiator import parse_accept

COMPUTED_HEADERS = frozenset({"content-length", "content-type"})


def to_domain_request(request: StarletteRequest) -> Request:
    """Convert a Starlette request. Unknown verbs are kept as strings."""
    verb = request.method.upper()
    try:
        method: Union[HTTPMethod, str] = HTTPMethod(verb)
    except ValueError:
        method = verb
    return Request(
        method=method,
        path=request.url.path,
        accept=parse_accept(request.headers.get("accept")),
    )


def to_starlette_response(response: Response) -> StarletteResponse:
    """Convert a domain response. Structured bodies are sent as JSON."""
    if response.is_structured:
        result: StarletteResponse = JSONResponse(
            response.body, status_code=response.status_code
        )
    else:
        result = StarletteResponse(
            response.body,
            status_code=response.status_code,
            media_type=response.media_type,
        )

    for name, value in response.headers:
        if name.lower() not in COMPUTED_HEADERS:
            result.headers.append(name, value)
    return result


class DownstreamApp(AsyncRequestHandler):
    """Adapts the rest of the ASGI stack to the handler port."""

    def __init__(
        self, request: StarletteRequest, call_next: RequestResponseEndpoint
    ) -> None:
        self._request = request
        self._call_next = call_next

    async def handle(self, request: Request) -> Response:
        # call_next always forwards the connection scope, so the method is
        # swapped there until the downstream body has been read.
        scope = self._request.scope
        original_method = scope["method"]
        scope["method"] = request.verb
        try:
            downstream = await self._call_next(self._request)
            body = b"".join([chunk async for chunk in downstream.body_iterator])
        finally:
            scope["method"] = original_method

        return Response(
            status_code=downstream.status_code,
            body=body,
            media_type=downstream.headers.get("content-type"),
            headers=list(downstream.headers.items()),
        )


class ErrorResponderMiddleware(BaseHTTPMiddleware):
    """Outermost application middleware. Never lets an exception through.

    Args:
        app: The wrapped ASGI application.
        body_builder: Builds error responses for the configured environment.
        error_logger: Logs failures. Defaults to ``ErrorLogger()``.
    """

    def __init__(
        self,
        app: ASGIApp,
        body_builder: ErrorBodyBuilder,
        error_logger: Optional[ErrorLogger] = None,
    ) -> None:
        super().__init__(app)
        self._body_builder = body_builder
        self._error_logger = error_logger or ErrorLogger()

    async def dispatch(
        self, request: StarletteRequest, call_next: RequestResponseEndpoint
    ) -> StarletteResponse:
        """Dispatch the request and convert the outcome to a response."""
        use_case = DispatchRequestUseCase(
            handler=DownstreamApp(request, call_next),
            body_builder=self._body_builder,
            error_logger=self._error_logger,
        )
        response = await use_case.respond_async(to_domain_request(request))
        return to_starlette_response(response)
