"""
Pydantic schemas documenting the HTTP contract.

The error body is produced by ErrorBodyBuilder, not by these models;
they describe it for the OpenAPI document. Optional fields are only
present outside production and only when non-empty.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    environment: str


class ErrorResponse(BaseModel):
    """Structured error body returned for every failed request."""

    model_config = ConfigDict(populate_by_name=True)

    error: bool = True
    reason: str
    metadata: Optional[dict[str, Any]] = None
    debug_reason: Optional[str] = Field(None, alias="debugReason")
    identifier: Optional[str] = None
    possible_causes: Optional[list[str]] = Field(None, alias="possibleCauses")
    suggested_fixes: Optional[list[str]] = Field(None, alias="suggestedFixes")
    documentation_links: Optional[list[str]] = Field(
        None, alias="documentationLinks"
    )
    stack_overflow_questions: Optional[list[str]] = Field(
        None, alias="stackOverflowQuestions"
    )
    github_issues: Optional[list[str]] = Field(None, alias="gitHubIssues")


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    "default": {"model": ErrorResponse, "description": "Error response"},
}
