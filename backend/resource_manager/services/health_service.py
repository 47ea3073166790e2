"""
Health service.
Provides health check functionality.
"""

import time

from sqlalchemy.exc import SQLAlchemyError

from resource_manager.core.config import settings
from resource_manager.core.logging import get_logger
from resource_manager.db import session as db_session
from resource_manager.db.repositories.health_repository import HealthRepository
from resource_manager.schemas.health import HealthResponse

logger = get_logger(__name__)


class HealthService:
    """Service for health check operations. Opens its own session per check."""

    def __init__(self):
        self.start_time = time.time()

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format

        checks = {}

        # Check database connectivity
        try:
            if db_session.async_session_maker is None:
                db_session.create_sessionmaker()
            async with db_session.async_session_maker() as session:
                repo = HealthRepository(session=session)
                db_status = await repo.check_database()
                checks["database"] = "ok" if db_status else "error"
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Database unreachable during health check", extra={"error": str(e)})
            checks["database"] = "error"

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            version=settings.VERSION,
            uptime=uptime_str,
            checks=checks,
        )
