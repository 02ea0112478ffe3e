"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel
from sqlalchemy import text

from tubevote.api.deps import MetadataProviderDep
from tubevote.db.session import get_engine
from tubevote.logging import get_logger

router = APIRouter(tags=["Health"])
logger = get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    components: dict[str, bool] | None = None


class ReadinessResponse(BaseModel):
    """Readiness check response."""

    ready: bool
    database: bool
    metadata_provider: bool


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Basic health check endpoint that verifies the API is running.",
)
async def health_check(provider: MetadataProviderDep) -> HealthResponse:
    """Basic health check - is the API up?

    Reports whether a real (non-stub) metadata provider is configured.
    """
    from tubevote import __version__

    return HealthResponse(
        status="healthy",
        version=__version__,
        components={"metadata_provider": provider.name != "stub"},
    )


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Readiness check that verifies the database and metadata provider.",
)
async def readiness_check(provider: MetadataProviderDep) -> ReadinessResponse:
    """Readiness check including dependencies."""
    database_ok = False
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
            database_ok = True
    except Exception as e:
        logger.error("database_health_check_failed", error=str(e))

    provider_ok = await provider.health_check()

    return ReadinessResponse(
        ready=database_ok and provider_ok,
        database=database_ok,
        metadata_provider=provider_ok,
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Simple liveness probe for Kubernetes.",
)
async def liveness_check() -> dict[str, str]:
    """Kubernetes liveness probe - is the process alive?"""
    return {"status": "alive"}
