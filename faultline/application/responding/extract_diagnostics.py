"""
Use case: Extract diagnostic fields from an error.

Input: any error value.
Output: a fresh dict holding only the non-empty diagnostic fields.
Side effects: None.

Keys are the wire names of the structured error body. A key is present
if and only if its source value is non-empty, so the result never holds
an empty string, list or mapping.
"""

from typing import Any

from faultline.domain.responding.errors import as_abort, as_debuggable

METADATA_KEY = "metadata"

DEBUG_KEYS = (
    "debugReason",
    "identifier",
    "possibleCauses",
    "suggestedFixes",
    "documentationLinks",
    "stackOverflowQuestions",
    "gitHubIssues",
)


def _set(document: dict[str, Any], key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, (str, list, tuple, dict)) and not value:
        return
    if isinstance(value, tuple):
        value = list(value)
    document[key] = value


def extract_diagnostics(error: BaseException) -> dict[str, Any]:
    """Collect metadata and debug facets for a non-production body.

    Args:
        error: The error raised by the downstream handler.

    Returns:
        A new dict. Empty when the error has neither capability.
    """
    diagnostics: dict[str, Any] = {}

    abort = as_abort(error)
    if abort is not None and abort.metadata is not None:
        _set(diagnostics, METADATA_KEY, dict(abort.metadata))

    debug = as_debuggable(error)
    if debug is not None:
        values = (
            debug.reason,
            debug.identifier,
            debug.possible_causes,
            debug.suggested_fixes,
            debug.documentation_links,
            debug.stack_overflow_questions,
            debug.github_issues,
        )
        for key, value in zip(DEBUG_KEYS, values):
            _set(diagnostics, key, value)

    return diagnostics
