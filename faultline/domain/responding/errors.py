"""
Error capabilities for the responding bounded context.

An error raised by a downstream handler may carry two orthogonal
capabilities:

- Abort: a declared HTTP status, a short reason and optional metadata.
  Surfaced to clients exactly as declared.
- Debuggable: long-form diagnostics (identifier, causes, fixes, links).
  Surfaced only outside production, always logged.

Errors may have neither, either, or both. Callers never inspect error
types directly; they go through ``as_abort`` and ``as_debuggable``.
"""

import re
from http import HTTPStatus
from typing import Any, Mapping, Optional, Union

from faultline.domain.responding.entities import AbortInfo, DebugInfo

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


class AbortError(Exception):
    """Base error carrying an explicit HTTP status.

    Args:
        status: HTTP status code to respond with.
        reason: Short human reason. Defaults to the standard phrase.
        metadata: Optional structured document passed through to clients
            outside production.
        headers: Response headers to send with the error, in every
            environment.
    """

    def __init__(
        self,
        status: Union[int, HTTPStatus],
        reason: Optional[str] = None,
        metadata: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.status = int(status)
        self.reason = reason if reason is not None else _phrase(self.status)
        self.metadata = metadata
        self.headers = dict(headers or {})
        super().__init__(self.reason)


class Abort(AbortError):
    """Concrete abort error with shortcuts for the common statuses."""

    @classmethod
    def bad_request(
        cls, reason: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None
    ) -> "Abort":
        return cls(HTTPStatus.BAD_REQUEST, reason, metadata)

    @classmethod
    def unauthorized(
        cls, reason: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None
    ) -> "Abort":
        return cls(HTTPStatus.UNAUTHORIZED, reason, metadata)

    @classmethod
    def forbidden(
        cls, reason: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None
    ) -> "Abort":
        return cls(HTTPStatus.FORBIDDEN, reason, metadata)

    @classmethod
    def not_found(
        cls, reason: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None
    ) -> "Abort":
        return cls(HTTPStatus.NOT_FOUND, reason, metadata)

    @classmethod
    def server_error(
        cls, reason: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None
    ) -> "Abort":
        return cls(HTTPStatus.INTERNAL_SERVER_ERROR, reason, metadata)


class Debuggable:
    """Mixin that gives an exception long-form diagnostics.

    Subclasses override the class attributes, or set instance attributes
    of the same name, to describe themselves. Empty lists are omitted
    from logs and response bodies.

    Attributes:
        readable_name: Human name of the error type. Defaults to the
            class name split into words.
        type_identifier: Stable prefix of ``full_identifier``. Defaults
            to the dotted import path of the class.
        identifier: Identifier of this particular failure.
    """

    readable_name: Optional[str] = None
    type_identifier: Optional[str] = None
    identifier: str = "unknown"
    possible_causes: tuple[str, ...] = ()
    suggested_fixes: tuple[str, ...] = ()
    documentation_links: tuple[str, ...] = ()
    stack_overflow_questions: tuple[str, ...] = ()
    github_issues: tuple[str, ...] = ()

    @property
    def debug_reason(self) -> str:
        """Long-form reason. Defaults to the exception message."""
        return str(self)

    @property
    def full_identifier(self) -> str:
        cls = type(self)
        prefix = cls.type_identifier or f"{cls.__module__}.{cls.__qualname__}"
        return f"{prefix}.{self.identifier}"

    @classmethod
    def display_name(cls) -> str:
        return cls.readable_name or _WORD_BOUNDARY.sub(" ", cls.__name__)


class RouteNotFoundError(AbortError, Debuggable):
    """Raised when no route matches the request path."""

    identifier = "route_not_found"
    possible_causes = ("The path or method has no registered handler",)
    suggested_fixes = ("Check the request path for typos",)

    def __init__(self, method: str, path: str) -> None:
        super().__init__(HTTPStatus.NOT_FOUND)
        self.method = method
        self.path = path

    @property
    def debug_reason(self) -> str:
        return f"No route registered for {self.method} {self.path}"


def as_abort(error: BaseException) -> Optional[AbortInfo]:
    """Return the abort capability of ``error``, or None.

    Besides ``AbortError``, recognises framework HTTP exceptions that
    expose an integer ``status_code`` and a ``detail``
    (Starlette/FastAPI ``HTTPException``).
    """
    if isinstance(error, AbortError):
        return AbortInfo(
            status=error.status,
            reason=error.reason,
            metadata=error.metadata,
            headers=tuple(error.headers.items()),
        )

    status = getattr(error, "status_code", None)
    if isinstance(status, int) and hasattr(error, "detail"):
        detail = getattr(error, "detail")
        reason = detail if isinstance(detail, str) else _phrase(status)
        metadata = detail if isinstance(detail, Mapping) else None
        headers = getattr(error, "headers", None) or {}
        return AbortInfo(
            status=status,
            reason=reason,
            metadata=metadata,
            headers=tuple(headers.items()),
        )

    return None


def as_debuggable(error: BaseException) -> Optional[DebugInfo]:
    """Return the debuggable capability of ``error``, or None."""
    if not isinstance(error, Debuggable):
        return None

    return DebugInfo(
        readable_name=error.display_name(),
        reason=error.debug_reason,
        identifier=error.full_identifier,
        possible_causes=tuple(error.possible_causes),
        suggested_fixes=tuple(error.suggested_fixes),
        documentation_links=tuple(error.documentation_links),
        stack_overflow_questions=tuple(error.stack_overflow_questions),
        github_issues=tuple(error.github_issues),
    )
