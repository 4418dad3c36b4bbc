"""
Health check router.

Provides a simple health endpoint for liveness and readiness checks.
Returns application status, version and deployment environment.
"""

from fastapi import APIRouter

from faultline.core.config import settings
from faultline.interfaces.responding.schemas import ERROR_RESPONSES, HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses=ERROR_RESPONSES,
    summary="Health check",
    description="Returns application health status, version and environment.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        environment=settings.environment.value,
    )
