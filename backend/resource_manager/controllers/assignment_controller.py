"""
Assignment controller.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.controllers.base_controller import BaseController
from resource_manager.services.assignment_service import AssignmentService
from resource_manager.schemas.assignment import (
    AssignmentCreate,
    AssignmentUpdate,
    AssignmentResponse,
    AssignmentWeekDeleteResponse,
    BulkAssignmentCreate,
    WeeklyAssignmentResponse,
)


class AssignmentController(BaseController):
    """Controller for assignment operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.assignment_service = AssignmentService(session)

    async def create_assignment(self, assignment_data: AssignmentCreate) -> AssignmentResponse:
        """Create a new assignment."""
        return await self.assignment_service.create_assignment(assignment_data)

    async def create_assignments_bulk(self, bulk_data: BulkAssignmentCreate) -> List[AssignmentResponse]:
        """Assign several employees to one project in a single transaction."""
        return await self.assignment_service.create_assignments_bulk(bulk_data)

    async def list_assignments(self) -> List[AssignmentResponse]:
        """List assignments."""
        return await self.assignment_service.list_assignments()

    async def get_assignment(self, assignment_id: int) -> AssignmentResponse:
        """Get assignment by ID."""
        return await self.assignment_service.get_assignment(assignment_id)

    async def update_assignment(
        self,
        assignment_id: int,
        assignment_data: AssignmentUpdate,
    ) -> AssignmentResponse:
        """Update an assignment."""
        return await self.assignment_service.update_assignment(assignment_id, assignment_data)

    async def delete_assignment(self, assignment_id: int) -> AssignmentResponse:
        """Delete an assignment."""
        return await self.assignment_service.delete_assignment(assignment_id)

    async def delete_assignment_week(
        self,
        assignment_id: int,
        week_start: Optional[date],
    ) -> AssignmentWeekDeleteResponse:
        """Remove one week from an assignment."""
        return await self.assignment_service.delete_assignment_week(assignment_id, week_start)

    def split_into_weeks(self, assignment_data: AssignmentCreate) -> List[WeeklyAssignmentResponse]:
        """Preview the weekly breakdown of an assignment."""
        return self.assignment_service.split_into_weeks(assignment_data)
