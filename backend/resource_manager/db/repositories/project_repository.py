"""
Project repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from resource_manager.db.repositories.base_repository import BaseRepository
from resource_manager.models.assignment import Assignment
from resource_manager.models.project import Project, ProjectRequirement, ProjectStatus


class ProjectRepository(BaseRepository[Project]):
    """Repository for project operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Project, session)

    def _base_query(self):
        """Base query with eager loading of relationships."""
        return select(Project).options(
            selectinload(Project.assignments).selectinload(Assignment.employee),
            selectinload(Project.requirements).selectinload(ProjectRequirement.role),
        )

    async def get(self, id: int) -> Optional[Project]:
        """Get project by ID with assignments and requirements loaded."""
        result = await self.session.execute(
            self._base_query()
            .where(Project.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Project]:
        """List all projects with relationships loaded."""
        result = await self.session.execute(
            self._base_query().order_by(Project.id).execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def search(self, query: str = "", status: Optional[ProjectStatus] = None) -> List[Project]:
        """Case-insensitive name search with an optional status filter."""
        stmt = self._base_query()
        if query:
            stmt = stmt.where(func.lower(Project.name).contains(query.lower()))
        if status is not None:
            stmt = stmt.where(Project.status == status)
        result = await self.session.execute(
            stmt.order_by(Project.id).execution_options(populate_existing=True)
        )
        return list(result.scalars().all())


class ProjectRequirementRepository(BaseRepository[ProjectRequirement]):
    """Repository for project requirement operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(ProjectRequirement, session)
