"""GET /health - Check health of all services."""

from datetime import UTC, datetime

from fastapi import Depends
from pydantic import BaseModel, Field

from config import APP_CONFIG, get_settings
from db import FirestoreService
from dependencies import get_firestore_service

# --- Response Schemas ---


class ServiceStatus(BaseModel):
    """Status of an individual service."""

    name: str
    status: str = Field(..., description="healthy, degraded, or unhealthy")
    latency_ms: float | None = Field(None, description="Response time in ms")
    error: str | None = Field(None, description="Error message if unhealthy")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status: healthy, degraded, unhealthy")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    services: list[ServiceStatus] = Field(
        ..., description="Individual service statuses"
    )
    timestamp: datetime


def overall_status(services: list[ServiceStatus]) -> str:
    statuses = [s.status for s in services]
    if all(s == "healthy" for s in statuses):
        return "healthy"
    if any(s == "unhealthy" for s in statuses):
        return "unhealthy"
    return "degraded"


# --- Handler ---


async def check_health(
    firestore: FirestoreService = Depends(get_firestore_service),
) -> HealthResponse:
    """Check health of all services."""
    settings = get_settings()
    firestore_health = await firestore.health_check()

    services = [
        ServiceStatus(
            name="firestore",
            status=firestore_health["status"],
            latency_ms=firestore_health.get("latency_ms"),
            error=firestore_health.get("error"),
        ),
        ServiceStatus(
            name="maps",
            status="healthy" if settings.maps_api_key else "degraded",
            error=None if settings.maps_api_key else "MAPS_API_KEY is not configured",
        ),
    ]

    return HealthResponse(
        status=overall_status(services),
        version=APP_CONFIG["version"],
        environment=settings.environment,
        services=services,
        timestamp=datetime.now(UTC),
    )
