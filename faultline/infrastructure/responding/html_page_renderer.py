"""
HTML error page adapter.

Renders a minimal, escaped error page with the status and reason only.
Diagnostics are never rendered into pages.
"""

from html import escape

from faultline.application.responding.classify_error import (
    headers_of,
    reason_of,
    status_of,
)
from faultline.domain.responding.entities import Response
from faultline.domain.responding.ports import PageRenderer

HTML_MEDIA_TYPE = "text/html; charset=utf-8"

PAGE_TEMPLATE = (
    "<!DOCTYPE html>"
    "<html><head><meta charset=\"utf-8\"><title>{title}</title></head>"
    "<body><h1>{status}</h1><p>{reason}</p></body></html>"
)


class HTMLErrorPageRenderer(PageRenderer):
    """Default page renderer for browsers and other HTML clients."""

    def render_error_page(self, error: BaseException) -> Response:
        status = status_of(error)
        reason = escape(reason_of(error))
        page = PAGE_TEMPLATE.format(
            title=f"{status} {reason}", status=status, reason=reason
        )
        return Response(
            status_code=status,
            body=page.encode("utf-8"),
            media_type=HTML_MEDIA_TYPE,
            headers=headers_of(error),
        )
