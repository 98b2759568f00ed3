"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from app.api.deps import Engine

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class ReadinessResponse(HealthResponse):
    """Readiness response including the active ruleset."""

    ruleset_id: str
    ruleset_version: str


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns service health status",
)
async def health_check() -> HealthResponse:
    """Check if the service is healthy.

    Returns:
        Health status response
    """
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns service readiness status for k8s probes",
)
async def readiness_check(engine: Engine) -> ReadinessResponse:
    """Check that the ruleset is loaded and the service can accept requests.

    Returns:
        Readiness status response
    """
    return ReadinessResponse(
        status="ok",
        ruleset_id=engine.ruleset.id,
        ruleset_version=engine.ruleset.version,
    )
