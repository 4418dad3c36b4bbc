"""
Use case: Classify an error into an HTTP status and reason.

Input: any error value.
Output: status code (int), reason (str).
Side effects: None.
Failure cases: None. Both functions are total.
"""

from http import HTTPStatus

from faultline.domain.responding.errors import as_abort

UNKNOWN_REASON = "Unknown Error"

_STATUS_CLASS_PHRASES = {
    1: "Informational",
    2: "Success",
    3: "Redirection",
    4: "Client Error",
    5: "Server Error",
}


def status_of(error: BaseException) -> int:
    """Return the declared status of an abort error, else 500."""
    abort = as_abort(error)
    if abort is not None:
        return abort.status
    return HTTPStatus.INTERNAL_SERVER_ERROR.value


def reason_phrase(status: int) -> str:
    """Return the standard reason phrase for a status code.

    Codes outside the registry fall back to the phrase of their class
    (499 -> "Client Error"), then to ``UNKNOWN_REASON``.
    """
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return _STATUS_CLASS_PHRASES.get(status // 100, UNKNOWN_REASON)


def reason_of(error: BaseException) -> str:
    """Return the abort reason if present and non-empty, else the status phrase."""
    abort = as_abort(error)
    if abort is not None and abort.reason:
        return abort.reason
    return reason_phrase(status_of(error))


def headers_of(error: BaseException) -> list[tuple[str, str]]:
    """Return the response headers declared by an abort error, if any."""
    abort = as_abort(error)
    if abort is None:
        return []
    return list(abort.headers)
