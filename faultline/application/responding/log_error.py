"""
Use case: Log an error raised during request handling.

Input: any error value.
Output: None.
Side effects: one ERROR record, followed by at most one INFO hint record.
Failure cases: None. Logging failures never reach the caller.
"""

import logging
from typing import Optional

from faultline.domain.responding.entities import DebugInfo
from faultline.domain.responding.errors import as_debuggable

logger = logging.getLogger(__name__)

_LIST_SEGMENTS = (
    ("Possible Causes", "possible_causes"),
    ("Suggested Fixes", "suggested_fixes"),
    ("Documentation Links", "documentation_links"),
    ("Stack Overflow Questions", "stack_overflow_questions"),
    ("GitHub Issues", "github_issues"),
)


def loggable(info: DebugInfo) -> str:
    """Render debug info as one bracketed, space-joined line.

    Example:
        ``[Route Not Found Error: No route] [Identifier: a.b] [Possible Causes: x, y]``
    """
    segments = [
        f"{info.readable_name}: {info.reason}",
        f"Identifier: {info.identifier}",
    ]
    for label, attribute in _LIST_SEGMENTS:
        values = getattr(info, attribute)
        if values:
            segments.append(f"{label}: {', '.join(values)}")
    return " ".join(f"[{segment}]" for segment in segments)


def type_name(error: BaseException) -> str:
    cls = type(error)
    return f"{cls.__module__}.{cls.__qualname__}"


class ErrorLogger:
    """Writes handler failures to the operational log.

    Args:
        log: Logger to write to. Defaults to this module's logger.
    """

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger

    def log_error(self, error: BaseException) -> None:
        """Log the error richly if it is debuggable, else with a hint."""
        try:
            debug = as_debuggable(error)
            if debug is not None:
                self._log.error(loggable(debug))
                return

            name = type_name(error)
            self._log.error("[%s: %s]", name, error)
            self._log.info(
                "Conform '%s' to Debuggable to provide more debug information.",
                name,
            )
        except Exception:  # noqa: BLE001 - logging must never fail a response
            pass
