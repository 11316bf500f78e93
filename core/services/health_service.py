"""Health checks for liveness and readiness probes."""

import time

from django.db import connection
from django.db.utils import OperationalError

import structlog

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = structlog.get_logger(__name__)


class HealthService:
    """Service for performing health checks with short-lived caching."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached database check results
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._db_health_cache: DependencyHealth | None = None
        self._db_health_cache_time: float = 0.0

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always alive while the process serves requests)."""
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status from the database health check.

        The service stays ready when the database is down: follow reads
        degrade to empty results, so traffic is still accepted and the
        response is flagged ``degraded``.
        """
        db_health = self.check_database_health()
        return ReadinessResponse(
            ready=True,
            status="ready" if db_health.healthy else "degraded",
            degraded=not db_health.healthy,
            dependencies={"database": db_health},
        )

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity, caching the result for the TTL.

        Uses ``ensure_connection()`` so no query is executed.
        """
        current_time = time.time()
        if (
            self._db_health_cache is not None
            and (current_time - self._db_health_cache_time) < self.cache_ttl_seconds
        ):
            return self._db_health_cache

        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
            health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Database connection successful",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        except OperationalError as e:
            logger.warning("Database health check failed", error=str(e))
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )

        self._db_health_cache = health
        self._db_health_cache_time = current_time
        return health


# Global health service instance
health_service = HealthService()
