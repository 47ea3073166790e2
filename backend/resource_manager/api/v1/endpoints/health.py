"""
Health check endpoint.
Returns system status and uptime information.
"""

from fastapi import APIRouter, Request

from resource_manager.schemas.health import HealthResponse
from resource_manager.deps.di_container import get_container

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def get_health(
    request: Request,
) -> HealthResponse:
    """
    Health check endpoint.
    Returns system status, uptime, and health checks.
    """
    container = get_container()
    controller = container.health_controller()
    return await controller.get_health()
