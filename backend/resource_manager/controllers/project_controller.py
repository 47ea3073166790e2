"""
Project controller.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.controllers.base_controller import BaseController
from resource_manager.services.project_service import ProjectService
from resource_manager.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectListResponse,
    RequirementStatusResponse,
)


class ProjectController(BaseController):
    """Controller for project operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.project_service = ProjectService(session)

    async def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create a new project with its requirements."""
        return await self.project_service.create_project(project_data)

    async def get_project(self, project_id: int) -> ProjectResponse:
        """Get project by ID."""
        return await self.project_service.get_project(project_id)

    async def list_projects(self) -> ProjectListResponse:
        """List projects."""
        projects = await self.project_service.list_projects()
        return ProjectListResponse(items=projects, total=len(projects))

    async def search_projects(self, query: str = "", status: Optional[str] = None) -> ProjectListResponse:
        """Search projects by name and status."""
        projects = await self.project_service.search_projects(query=query, status=status)
        return ProjectListResponse(items=projects, total=len(projects))

    async def update_project(self, project_id: int, project_data: ProjectUpdate) -> ProjectResponse:
        """Update a project."""
        return await self.project_service.update_project(project_id, project_data)

    async def delete_project(self, project_id: int) -> None:
        """Delete a project with its requirements and assignments."""
        await self.project_service.delete_project(project_id)

    async def get_requirement_status(self, project_id: int) -> RequirementStatusResponse:
        """How well the project's staffing requirements are covered."""
        return await self.project_service.get_requirement_status(project_id)
