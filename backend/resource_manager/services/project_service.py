"""
Project service with business logic.

Project status is stored, but always recomputed from the dates when a project
is written. It is not refreshed on read, so a project nobody touches keeps its
old status after its dates pass.
"""

from functools import partial
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.core.config import settings
from resource_manager.core.exceptions import NotFoundError, ValidationError
from resource_manager.core.logging import get_logger
from resource_manager.db.repositories.assignment_repository import AssignmentRepository
from resource_manager.db.repositories.lookup_repository import LookupRepository
from resource_manager.db.repositories.project_repository import ProjectRepository, ProjectRequirementRepository
from resource_manager.models.project import Project, ProjectStatus
from resource_manager.models.role import Role
from resource_manager.schemas.project import (
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    RequirementCreate,
    RequirementStatusResponse,
)
from resource_manager.schemas.common import EmployeeSummary
from resource_manager.services.base_service import BaseService
from resource_manager.utils.project_status import derive_project_status, requirement_status

logger = get_logger(__name__)

ALL_STATUSES = "ALL"
DEFAULT_TOOLS = ["None"]


class ProjectService(BaseService):
    """Service for project operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.project_repo = ProjectRepository(session)
        self.requirement_repo = ProjectRequirementRepository(session)
        self.assignment_repo = AssignmentRepository(session)
        self.role_repo = LookupRepository(Role, session)

    async def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create a project and its requirements in one transaction."""
        await self._ensure_roles(project_data.requirements)
        fields = self._project_fields(project_data)

        async def create_with_requirements() -> Project:
            project = await self.project_repo.create(**fields)
            if project_data.requirements:
                await self.requirement_repo.create_many(
                    [dict(r.model_dump(), project_id=project.id) for r in project_data.requirements]
                )
            return project

        [project] = await self.unit_of_work.run(create_with_requirements)
        logger.info(
            "Project created",
            extra={"project_id": project.id, "status": fields["status"].value, "requirements": len(project_data.requirements)},
        )
        return await self.get_project(project.id)

    async def get_project(self, project_id: int) -> ProjectResponse:
        """Get project by ID with assignments and requirements."""
        return self._project_to_response(await self._get_or_404(project_id))

    async def list_projects(self) -> List[ProjectResponse]:
        """List all projects."""
        projects = await self.project_repo.list_all()
        return [self._project_to_response(p) for p in projects]

    async def search_projects(self, query: str = "", status: Optional[str] = None) -> List[ProjectResponse]:
        """Search projects by name, optionally restricted to one status (``ALL`` for any)."""
        status_filter = None
        if status and status != ALL_STATUSES:
            try:
                status_filter = ProjectStatus(status)
            except ValueError:
                raise ValidationError(
                    "Invalid project status",
                    details={"status": status, "allowed": [s.value for s in ProjectStatus] + [ALL_STATUSES]},
                )
        projects = await self.project_repo.search(query=query, status=status_filter)
        return [self._project_to_response(p) for p in projects]

    async def update_project(self, project_id: int, project_data: ProjectUpdate) -> ProjectResponse:
        """
        Replace a project's fields and recompute its status.

        When ``requirements`` is given the stored list is replaced in the same
        transaction as the field update.
        """
        await self._get_or_404(project_id)
        if project_data.requirements is not None:
            await self._ensure_roles(project_data.requirements)

        operations = [partial(self.project_repo.update, project_id, **self._project_fields(project_data))]
        if project_data.requirements is not None:
            operations.append(partial(self.requirement_repo.delete_many, project_id=project_id))
            if project_data.requirements:
                operations.append(
                    partial(
                        self.requirement_repo.create_many,
                        [dict(r.model_dump(), project_id=project_id) for r in project_data.requirements],
                    )
                )

        await self.unit_of_work.run(*operations)
        logger.info("Project updated", extra={"project_id": project_id})
        return await self.get_project(project_id)

    async def delete_project(self, project_id: int) -> None:
        """Delete a project with its requirements and assignments."""
        await self._get_or_404(project_id)
        removed_assignments, removed_requirements, _ = await self.unit_of_work.run(
            partial(self.assignment_repo.delete_many, project_id=project_id),
            partial(self.requirement_repo.delete_many, project_id=project_id),
            partial(self.project_repo.delete, project_id),
        )
        logger.info(
            "Project deleted",
            extra={
                "project_id": project_id,
                "assignments_removed": removed_assignments,
                "requirements_removed": removed_requirements,
            },
        )

    async def get_requirement_status(self, project_id: int) -> RequirementStatusResponse:
        """How far the project's assignments meet its staffing requirements."""
        project = await self._get_or_404(project_id)
        result = requirement_status(
            project.requirements,
            project.assignments,
            min_utilisation=settings.REQUIREMENT_MIN_UTILISATION,
        )
        return RequirementStatusResponse(project_id=project_id, status=result.status, coverage=result.coverage)

    async def _get_or_404(self, project_id: int) -> Project:
        project = await self.project_repo.get(project_id)
        if project is None:
            raise NotFoundError("Project not found", details={"project_id": project_id})
        return project

    async def _ensure_roles(self, requirements: List[RequirementCreate]) -> None:
        wanted = {r.role_id for r in requirements}
        missing = sorted(wanted - await self.role_repo.existing_ids(list(wanted)))
        if missing:
            raise NotFoundError("Role not found", details={"role_ids": missing})

    @staticmethod
    def _project_fields(project_data: ProjectCreate) -> dict:
        fields = project_data.model_dump(exclude={"requirements"})
        fields["tools"] = fields["tools"] or list(DEFAULT_TOOLS)
        fields["status"] = derive_project_status(project_data.start_date, project_data.end_date)
        return fields

    @staticmethod
    def _project_to_response(project: Project) -> ProjectResponse:
        """Build ProjectResponse from a project with eager-loaded relationships."""
        return ProjectResponse.model_validate({
            "id": project.id,
            "name": project.name,
            "status": project.status,
            "start_date": project.start_date,
            "end_date": project.end_date,
            "type": project.type,
            "tools": project.tools or [],
            "client_satisfaction": project.client_satisfaction,
            "assignments": [
                {
                    "id": a.id,
                    "employee_id": a.employee_id,
                    "start_date": a.start_date,
                    "end_date": a.end_date,
                    "utilisation": a.utilisation,
                    "employee": EmployeeSummary.model_validate(a.employee) if a.employee is not None else None,
                }
                for a in project.assignments
            ],
            "requirements": [
                {
                    "id": r.id,
                    "role_id": r.role_id,
                    "role_name": r.role.name if r.role is not None else None,
                    "seniority": r.seniority,
                    "start_date": r.start_date,
                    "end_date": r.end_date,
                    "quantity": r.quantity,
                }
                for r in project.requirements
            ],
        })
