"""Health handlers."""

from apps.health.handlers.check_health import HealthResponse, check_health

__all__ = ["HealthResponse", "check_health"]
