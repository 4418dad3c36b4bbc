"""
Tests for the responding domain layer.

Tests error capabilities and their queries in isolation.
No external dependencies or IO required.
"""

from fastapi import HTTPException

from faultline.domain.responding.entities import AbortInfo, HTTPMethod, Request, Response
from faultline.domain.responding.errors import (
    Abort,
    AbortError,
    Debuggable,
    RouteNotFoundError,
    as_abort,
    as_debuggable,
)


class PaymentDeclinedError(Debuggable, Exception):
    """Debuggable-only error used across the tests."""

    identifier = "declined"
    possible_causes = ("Card expired", "Insufficient balance")
    documentation_links = ("https://docs.example.com/payments",)


class QuotaError(AbortError, Debuggable):
    """Error with both capabilities."""

    readable_name = "Quota"
    type_identifier = "billing.QuotaError"
    identifier = "exceeded"

    def __init__(self) -> None:
        super().__init__(429, "Too many widgets", metadata={"limit": 10})


class TestAbortError:
    """Tests for AbortError and the Abort shortcuts."""

    def test_reason_defaults_to_standard_phrase(self) -> None:
        assert AbortError(404).reason == "Not Found"

    def test_unknown_status_has_empty_default_reason(self) -> None:
        assert AbortError(499).reason == ""

    def test_not_found_shortcut(self) -> None:
        error = Abort.not_found()
        assert error.status == 404
        assert error.reason == "Not Found"
        assert error.metadata is None

    def test_shortcuts_keep_custom_reason_and_metadata(self) -> None:
        error = Abort.bad_request("Missing name", metadata={"field": "name"})
        assert error.status == 400
        assert error.reason == "Missing name"
        assert error.metadata == {"field": "name"}

    def test_message_is_reason(self) -> None:
        assert str(Abort.forbidden()) == "Forbidden"


class TestAsAbort:
    """Tests for the abort capability query."""

    def test_abort_error(self) -> None:
        info = as_abort(Abort.unauthorized(metadata={"realm": "api"}))
        assert info == AbortInfo(401, "Unauthorized", {"realm": "api"})

    def test_opaque_error_has_no_abort_capability(self) -> None:
        assert as_abort(ValueError("boom")) is None

    def test_framework_http_exception_with_string_detail(self) -> None:
        info = as_abort(HTTPException(status_code=409, detail="Already exists"))
        assert info is not None
        assert info.status == 409
        assert info.reason == "Already exists"
        assert info.metadata is None

    def test_framework_http_exception_with_mapping_detail(self) -> None:
        info = as_abort(HTTPException(status_code=400, detail={"field": "x"}))
        assert info is not None
        assert info.reason == "Bad Request"
        assert info.metadata == {"field": "x"}

    def test_abort_error_headers(self) -> None:
        error = AbortError(405, headers={"Allow": "GET, HEAD"})
        assert as_abort(error).headers == (("Allow", "GET, HEAD"),)

    def test_framework_http_exception_headers(self) -> None:
        error = HTTPException(
            status_code=401, detail="x", headers={"WWW-Authenticate": "Bearer"}
        )
        assert as_abort(error).headers == (("WWW-Authenticate", "Bearer"),)

    def test_no_headers_by_default(self) -> None:
        assert as_abort(Abort.not_found()).headers == ()
        assert as_abort(HTTPException(status_code=404)).headers == ()


class TestAsDebuggable:
    """Tests for the debuggable capability query."""

    def test_opaque_error_has_no_debug_capability(self) -> None:
        assert as_debuggable(RuntimeError("x")) is None

    def test_abort_only_error_has_no_debug_capability(self) -> None:
        assert as_debuggable(Abort.not_found()) is None

    def test_defaults_derived_from_class(self) -> None:
        info = as_debuggable(PaymentDeclinedError("Card was declined"))
        assert info is not None
        assert info.readable_name == "Payment Declined Error"
        assert info.reason == "Card was declined"
        assert info.identifier == f"{__name__}.PaymentDeclinedError.declined"
        assert info.possible_causes == ("Card expired", "Insufficient balance")
        assert info.suggested_fixes == ()
        assert info.github_issues == ()

    def test_overridden_names(self) -> None:
        info = as_debuggable(QuotaError())
        assert info is not None
        assert info.readable_name == "Quota"
        assert info.identifier == "billing.QuotaError.exceeded"

    def test_both_capabilities(self) -> None:
        error = QuotaError()
        assert as_abort(error) == AbortInfo(429, "Too many widgets", {"limit": 10})
        assert as_debuggable(error) is not None


class TestRouteNotFoundError:
    """Tests for the router's not-found error."""

    def test_behaves_as_not_found_abort(self) -> None:
        info = as_abort(RouteNotFoundError("GET", "/missing"))
        assert info == AbortInfo(404, "Not Found", None)

    def test_debug_reason_names_route(self) -> None:
        info = as_debuggable(RouteNotFoundError("POST", "/items"))
        assert info is not None
        assert info.reason == "No route registered for POST /items"
        assert info.identifier.endswith("RouteNotFoundError.route_not_found")


class TestResponse:
    """Tests for the Response entity."""

    def test_defaults_to_empty_bytes(self) -> None:
        response = Response(status_code=204)
        assert response.body == b""
        assert not response.is_structured

    def test_structured_body(self) -> None:
        assert Response(status_code=500, body={"error": True}).is_structured


class TestRequest:
    """Tests for the Request entity."""

    def test_verb_of_standard_method(self) -> None:
        assert Request(method=HTTPMethod.GET, path="/").verb == "GET"

    def test_verb_of_extension_method(self) -> None:
        request = Request(method="PROPFIND", path="/")
        assert request.verb == "PROPFIND"
        assert request.method != HTTPMethod.HEAD
