"""
Port interfaces (ABCs) for the responding bounded context.

Ports define the contracts that the dispatch wrapper requires from
the outside world. Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod

from faultline.domain.responding.entities import Request, Response


class RequestHandler(ABC):
    """Port for the downstream handler (router, application)."""

    @abstractmethod
    def handle(self, request: Request) -> Response:
        """Produce a response for the request. May raise any error."""
        raise NotImplementedError


class AsyncRequestHandler(ABC):
    """Awaitable variant of ``RequestHandler`` for event-loop servers."""

    @abstractmethod
    async def handle(self, request: Request) -> Response:
        """Produce a response for the request. May raise any error."""
        raise NotImplementedError


class PageRenderer(ABC):
    """Port for rendering an error as a human-readable page."""

    @abstractmethod
    def render_error_page(self, error: BaseException) -> Response:
        """Render the error. The result is returned to the client as-is."""
        raise NotImplementedError


class ContentNegotiator(ABC):
    """Port for querying the client's representation preference."""

    @abstractmethod
    def prefers(self, request: Request, format_name: str) -> bool:
        """Return True if the client prefers the named format.

        Args:
            request: The original inbound request.
            format_name: Short format name, e.g. ``"html"``.
        """
        raise NotImplementedError
