"""Health endpoints for the planning service."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from src.config import settings

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Service identity and display configuration."""

    status: str
    service: str
    timestamp: datetime
    version: str
    environment: str
    currency: str


class LivenessResponse(BaseModel):
    """Response model for liveness probe."""

    status: str


class ReadinessResponse(BaseModel):
    """Readiness with one entry per checked component."""

    status: str
    checks: dict[str, str]


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report service name, version, and configured currency."""
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        timestamp=datetime.now(UTC),
        version=settings.app_version,
        environment=settings.app_env,
        currency=settings.currency_code,
    )


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Liveness probe - app is running."""
    return LivenessResponse(status="alive")


@router.get("/ready", response_model=ReadinessResponse)
async def readiness(request: Request) -> ReadinessResponse:
    """Readiness probe.

    Cost and timeline endpoints render amounts and dates through the
    formatter set up at startup, so the service is ready only once it
    exists and can format a sample amount.
    """
    checks: dict[str, str] = {"api": "ok"}

    formatter = getattr(request.app.state, "formatter", None)
    if formatter is None:
        checks["formatter"] = "not_configured"
    elif formatter.format_currency(0) == "N/A":
        checks["formatter"] = "failed"
    else:
        checks["formatter"] = "ok"

    status = "ready" if all(v == "ok" for v in checks.values()) else "not_ready"
    return ReadinessResponse(status=status, checks=checks)
