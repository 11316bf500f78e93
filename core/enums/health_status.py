"""Health status enumeration for service dependencies."""

from enum import Enum


class HealthStatus(str, Enum):
    """Health status of a dependency as reported by readiness checks."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
