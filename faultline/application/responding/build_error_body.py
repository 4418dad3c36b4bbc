"""
Use case: Build the response for an error.

Input: the error and the original request.
Output: Response (rendered page or structured body).
Side effects: None, apart from a warning when the page renderer fails.
Failure cases: None. A failing page renderer falls back to the
structured body.

Production bodies carry exactly ``error`` and ``reason``. Every other
environment adds the non-empty diagnostic fields of the error.
"""

import logging
from typing import Any

from faultline.application.responding.classify_error import (
    headers_of,
    reason_of,
    status_of,
)
from faultline.application.responding.extract_diagnostics import extract_diagnostics
from faultline.domain.responding.entities import Environment, Request, Response
from faultline.domain.responding.ports import ContentNegotiator, PageRenderer

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
DEFAULT_PAGE_FORMAT = "html"


class ErrorBodyBuilder:
    """Chooses the error representation and assembles the structured body.

    Args:
        environment: Deployment environment, fixed at construction.
        negotiator: Answers whether the client prefers a rendered page.
        renderer: Renders the error page when one is preferred.
        page_format: Format name passed to the negotiator.
    """

    def __init__(
        self,
        environment: Environment,
        negotiator: ContentNegotiator,
        renderer: PageRenderer,
        page_format: str = DEFAULT_PAGE_FORMAT,
    ) -> None:
        self._environment = environment
        self._negotiator = negotiator
        self._renderer = renderer
        self._page_format = page_format

    @property
    def environment(self) -> Environment:
        return self._environment

    def build(self, error: BaseException, request: Request) -> Response:
        """Build the response for ``error`` raised while handling ``request``."""
        if self._negotiator.prefers(request, self._page_format):
            try:
                return self._renderer.render_error_page(error)
            except Exception:
                logger.warning(
                    "Error page rendering failed, falling back to %s",
                    JSON_MEDIA_TYPE,
                    exc_info=True,
                )

        return Response(
            status_code=status_of(error),
            body=self.body(error),
            media_type=JSON_MEDIA_TYPE,
            headers=headers_of(error),
        )

    def body(self, error: BaseException) -> dict[str, Any]:
        """Return the structured document for ``error``."""
        document: dict[str, Any] = {"error": True, "reason": reason_of(error)}

        if self._environment is Environment.PRODUCTION:
            return document

        document.update(extract_diagnostics(error))
        return document
