"""
Assignment repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from resource_manager.db.repositories.base_repository import BaseRepository
from resource_manager.models.assignment import Assignment


class AssignmentRepository(BaseRepository[Assignment]):
    """Repository for assignment operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Assignment, session)

    def _base_query(self):
        return select(Assignment).options(
            selectinload(Assignment.employee),
            selectinload(Assignment.project),
        )

    async def get(self, id: int) -> Optional[Assignment]:
        """Get assignment by ID with employee and project loaded."""
        result = await self.session.execute(
            self._base_query()
            .where(Assignment.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_many(self, ids: List[int]) -> List[Assignment]:
        """Get several assignments, returned in the order of ``ids``."""
        if not ids:
            return []
        result = await self.session.execute(
            self._base_query()
            .where(Assignment.id.in_(ids))
            .execution_options(populate_existing=True)
        )
        by_id = {assignment.id: assignment for assignment in result.scalars().all()}
        return [by_id[id] for id in ids if id in by_id]

    async def list_by_start_date_desc(self) -> List[Assignment]:
        """All assignments, newest start first; ties broken by id so the order is stable."""
        result = await self.session.execute(
            self._base_query()
            .order_by(Assignment.start_date.desc(), Assignment.id.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def list_with_employees(self) -> List[Assignment]:
        """All assignments with their employee loaded, oldest start first."""
        result = await self.session.execute(
            select(Assignment)
            .options(selectinload(Assignment.employee))
            .order_by(Assignment.start_date.asc(), Assignment.id.asc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
