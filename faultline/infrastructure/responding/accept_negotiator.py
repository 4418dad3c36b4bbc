"""
Content negotiation adapter.

Parses the ``Accept`` header into an ordered preference list and
answers whether the client's top preference matches a format name.
"""

import math

from faultline.domain.responding.entities import Request
from faultline.domain.responding.ports import ContentNegotiator

DEFAULT_QUALITY = 1.0


def _quality(params: list[str]) -> float:
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() == "q":
            try:
                quality = float(value.strip())
            except ValueError:
                return DEFAULT_QUALITY
            if not math.isfinite(quality) or not 0 <= quality <= 1:
                return DEFAULT_QUALITY
            return quality
    return DEFAULT_QUALITY


def parse_accept(header: str | None) -> tuple[str, ...]:
    """Parse an Accept header into media types, most preferred first.

    Entries are ordered by their ``q`` value; ties keep header order.
    Entries with ``q=0`` are dropped. A malformed ``q`` (not a number,
    not finite, or outside 0..1) counts as 1.0.

    Args:
        header: Raw header value, or None when absent.

    Returns:
        Lower-cased media types without parameters.
    """
    if not header:
        return ()

    entries: list[tuple[float, str]] = []
    for part in header.split(","):
        media_type, *params = part.split(";")
        media_type = media_type.strip().lower()
        if not media_type:
            continue
        quality = _quality(params)
        if quality <= 0:
            continue
        entries.append((quality, media_type))

    entries.sort(key=lambda entry: entry[0], reverse=True)
    return tuple(media_type for _, media_type in entries)


class AcceptNegotiator(ContentNegotiator):
    """Prefers a format when the client's first choice names it.

    ``text/html`` satisfies ``"html"``; ``*/*`` satisfies nothing.
    """

    def prefers(self, request: Request, format_name: str) -> bool:
        if not request.accept:
            return False
        return format_name.lower() in request.accept[0]
