"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from resource_manager.api.v1.endpoints import (
    health,
    assignments,
    employees,
    projects,
    reports,
    lookups,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(assignments.router, prefix="/assignments", tags=["assignments"])
api_router.include_router(assignments.bulk_router, tags=["assignments"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(lookups.router, tags=["lookups"])
