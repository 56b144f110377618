"""Health check service with caching."""

import logging
import time

from django.db import connection
from django.db.utils import OperationalError

import django_rq

from core.constants import MENTIONS_QUEUE_NAME
from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)


class HealthService:
    """Service for performing health checks with caching."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached health check results
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._cache: dict[str, tuple[float, DependencyHealth]] = {}

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always returns alive)."""
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status with database and Redis health checks.

        Returns degraded (ready=True, degraded=True) when a dependency is
        down: parsing still works without the sent-mentions store or queue.
        """
        dependencies = {
            "database": self.check_database_health(),
            "redis": self.check_redis_health(),
        }
        all_healthy = all(health.healthy for health in dependencies.values())

        return ReadinessResponse(
            ready=True,
            status="ready" if all_healthy else "degraded",
            degraded=not all_healthy,
            dependencies=dependencies,
        )

    def _cached(self, name: str) -> DependencyHealth | None:
        entry = self._cache.get(name)
        if entry and (time.time() - entry[0]) < self.cache_ttl_seconds:
            return entry[1]
        return None

    def _store(self, name: str, health: DependencyHealth) -> DependencyHealth:
        self._cache[name] = (time.time(), health)
        return health

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity with caching.

        Uses Django's ensure_connection() for efficient socket validation
        without executing queries.
        """
        cached = self._cached("database")
        if cached is not None:
            return cached

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
            logger.warning(f"Database health check failed: {e}")
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        return self._store("database", health)

    def check_redis_health(self) -> DependencyHealth:
        """Check the Redis connection of the dispatch queue with caching."""
        cached = self._cached("redis")
        if cached is not None:
            return cached

        start_time = time.perf_counter()
        try:
            django_rq.get_connection(MENTIONS_QUEUE_NAME).ping()
            health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Redis connection successful",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        except Exception as e:
            logger.warning(f"Redis health check failed: {e}")
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.ERROR,
                message=f"Redis connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        return self._store("redis", health)


# Global health service instance
health_service = HealthService()
