"""
Health controller.
Coordinates health service to return health status.
"""

from typing import Optional

from resource_manager.controllers.base_controller import BaseController
from resource_manager.schemas.health import HealthResponse
from resource_manager.services.health_service import HealthService


class HealthController(BaseController):
    """Controller for health check operations."""

    def __init__(self, health_service: Optional[HealthService] = None):
        super().__init__()
        self.health_service = health_service or HealthService()

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, version, uptime, and checks
        """
        return await self.health_service.get_health()
