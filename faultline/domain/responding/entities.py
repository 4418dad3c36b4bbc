"""
Domain entities for the responding bounded context.

Request and Response live for a single dispatch call.
Environment is read once at startup and never mutated.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Union


class HTTPMethod(Enum):
    """HTTP request method."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"


class Environment(Enum):
    """Deployment environment. Gates diagnostic verbosity."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass(frozen=True)
class Request:
    """An inbound HTTP request as seen by the dispatch wrapper.

    Attributes:
        method: The HTTP method. Verbs outside ``HTTPMethod`` (WebDAV,
            custom extensions) are kept as the raw upper-case string.
        path: The request target path.
        accept: Accepted media types, most preferred first.
    """

    method: Union[HTTPMethod, str]
    path: str
    accept: tuple[str, ...] = ()

    @property
    def verb(self) -> str:
        """The method as sent on the wire."""
        if isinstance(self.method, HTTPMethod):
            return self.method.value
        return self.method


@dataclass
class Response:
    """An outbound HTTP response.

    ``body`` is either raw bytes (possibly empty) or a structured
    document that the transport layer serializes as JSON.
    """

    status_code: int
    body: Union[bytes, dict[str, Any]] = b""
    media_type: Optional[str] = None
    headers: list[tuple[str, str]] = field(default_factory=list)

    @property
    def is_structured(self) -> bool:
        """Whether the body is a structured document rather than bytes."""
        return isinstance(self.body, dict)


@dataclass(frozen=True)
class AbortInfo:
    """Abort capability of an error: a declared status and short reason.

    ``headers`` are response headers the status requires, such as
    ``Allow`` for 405 or ``WWW-Authenticate`` for 401.
    """

    status: int
    reason: str
    metadata: Optional[Mapping[str, Any]] = None
    headers: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class DebugInfo:
    """Debuggable capability of an error: long-form diagnostics."""

    readable_name: str
    reason: str
    identifier: str
    possible_causes: tuple[str, ...] = ()
    suggested_fixes: tuple[str, ...] = ()
    documentation_links: tuple[str, ...] = ()
    stack_overflow_questions: tuple[str, ...] = ()
    github_issues: tuple[str, ...] = ()
