"""
Employee repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from resource_manager.db.repositories.base_repository import BaseRepository
from resource_manager.models.assignment import Assignment
from resource_manager.models.employee import Employee, Seniority


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for employee operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Employee, session)

    def _with_assignments(self):
        return select(Employee).options(
            selectinload(Employee.assignments).selectinload(Assignment.project),
        )

    async def get_with_assignments(self, id: int) -> Optional[Employee]:
        """Get employee by ID with assignments and their projects eager loaded."""
        result = await self.session.execute(
            self._with_assignments()
            .where(Employee.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_with_assignments(self, seniority: Optional[Seniority] = None) -> List[Employee]:
        """List employees with assignments loaded, optionally filtered by seniority."""
        query = self._with_assignments()
        if seniority is not None:
            query = query.where(Employee.seniority == seniority)
        result = await self.session.execute(
            query.order_by(Employee.id).execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def list_with_assignments_in_window(self, window_start, window_end) -> List[Employee]:
        """
        List every employee, loading only the assignments that overlap the window.

        Employees without overlapping assignments are still returned.
        """
        result = await self.session.execute(
            select(Employee)
            .options(
                selectinload(
                    Employee.assignments.and_(
                        Assignment.start_date <= window_end,
                        Assignment.end_date >= window_start,
                    )
                )
            )
            .order_by(Employee.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
