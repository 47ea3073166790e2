"""
Assignment service: creates, updates, deletes and week-splits assignments.

Every write goes through the unit of work, so a failure in any step of a
multi-step change (bulk create, split) leaves nothing behind. Overlapping
assignments are allowed; only the exact (employee, project, start, end)
tuple is unique, and the store enforces it.
"""

from datetime import date
from functools import partial
from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.core.exceptions import NotFoundError, ValidationError
from resource_manager.core.logging import get_logger
from resource_manager.db.repositories.assignment_repository import AssignmentRepository
from resource_manager.db.repositories.employee_repository import EmployeeRepository
from resource_manager.db.repositories.project_repository import ProjectRepository
from resource_manager.models.assignment import Assignment
from resource_manager.schemas.assignment import (
    AssignmentCreate,
    AssignmentResponse,
    AssignmentUpdate,
    AssignmentWeekDeleteResponse,
    BulkAssignmentCreate,
    WeeklyAssignmentResponse,
)
from resource_manager.services.base_service import BaseService
from resource_manager.utils.week_utils import WeekRemovalKind, plan_week_removal, split_into_weeks

logger = get_logger(__name__)

ASSIGNMENT_CONFLICT_MESSAGE = (
    "One or more employees are already assigned to this project for the given date range"
)


class AssignmentService(BaseService):
    """Service for assignment operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.assignment_repo = AssignmentRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.project_repo = ProjectRepository(session)

    async def list_assignments(self) -> List[AssignmentResponse]:
        """All assignments, latest start date first."""
        assignments = await self.assignment_repo.list_by_start_date_desc()
        return [AssignmentResponse.model_validate(a) for a in assignments]

    async def get_assignment(self, assignment_id: int) -> AssignmentResponse:
        """Get assignment by ID."""
        return AssignmentResponse.model_validate(await self._get_or_404(assignment_id))

    async def create_assignment(self, data: AssignmentCreate) -> AssignmentResponse:
        """Create a single assignment."""
        await self._ensure_references([data.employee_id], data.project_id)

        [assignment] = await self.unit_of_work.run(
            partial(self.assignment_repo.create, **data.model_dump()),
            conflict_message=ASSIGNMENT_CONFLICT_MESSAGE,
        )
        logger.info(
            "Assignment created",
            extra={"assignment_id": assignment.id, "employee_id": data.employee_id, "project_id": data.project_id},
        )
        return await self._to_response(assignment.id)

    async def create_assignments_bulk(self, data: BulkAssignmentCreate) -> List[AssignmentResponse]:
        """
        Assign several employees to one project with the same dates and utilisation.

        All rows are written in one transaction; a single conflict aborts the batch.
        """
        if not data.employee_ids:
            raise ValidationError("employee_ids must be a non-empty array")
        await self._ensure_references(data.employee_ids, data.project_id)

        operations = [
            partial(
                self.assignment_repo.create,
                employee_id=employee_id,
                project_id=data.project_id,
                start_date=data.start_date,
                end_date=data.end_date,
                utilisation=data.utilisation,
            )
            for employee_id in data.employee_ids
        ]
        created = await self.unit_of_work.run(*operations, conflict_message=ASSIGNMENT_CONFLICT_MESSAGE)
        logger.info(
            "Bulk assignments created",
            extra={"project_id": data.project_id, "count": len(created)},
        )
        assignments = await self.assignment_repo.get_many([a.id for a in created])
        return [AssignmentResponse.model_validate(a) for a in assignments]

    async def update_assignment(self, assignment_id: int, data: AssignmentUpdate) -> AssignmentResponse:
        """Replace employee, project, dates and utilisation of an assignment."""
        await self._get_or_404(assignment_id)
        await self._ensure_references([data.employee_id], data.project_id)

        await self.unit_of_work.run(
            partial(self.assignment_repo.update, assignment_id, **data.model_dump()),
            conflict_message=ASSIGNMENT_CONFLICT_MESSAGE,
        )
        logger.info("Assignment updated", extra={"assignment_id": assignment_id})
        return await self._to_response(assignment_id)

    async def delete_assignment(self, assignment_id: int) -> AssignmentResponse:
        """Delete an assignment and return it as it was."""
        deleted = AssignmentResponse.model_validate(await self._get_or_404(assignment_id))
        await self.unit_of_work.run(partial(self.assignment_repo.delete, assignment_id))
        logger.info("Assignment deleted", extra={"assignment_id": assignment_id})
        return deleted

    async def delete_assignment_week(
        self,
        assignment_id: int,
        week_start: Optional[date],
    ) -> AssignmentWeekDeleteResponse:
        """
        Remove the week starting at ``week_start`` from an assignment.

        Depending on where the week falls the assignment is deleted, shortened
        at either end, or split in two around the week.
        """
        if week_start is None:
            raise ValidationError("Week start date is required")

        assignment = await self._get_or_404(assignment_id)
        plan = plan_week_removal(assignment.start_date, assignment.end_date, week_start)
        if plan is None:
            raise ValidationError(
                "Invalid week range",
                details={
                    "week_start": week_start.isoformat(),
                    "assignment_start": assignment.start_date.isoformat(),
                    "assignment_end": assignment.end_date.isoformat(),
                },
            )

        logger.info(
            "Removing week from assignment",
            extra={"assignment_id": assignment_id, "week_start": week_start.isoformat(), "kind": plan.kind.value},
        )

        if plan.kind == WeekRemovalKind.DELETE:
            await self.unit_of_work.run(partial(self.assignment_repo.delete, assignment_id))
            return AssignmentWeekDeleteResponse(kind=plan.kind, deleted_assignment_id=assignment_id)

        if plan.kind in (WeekRemovalKind.SHRINK_START, WeekRemovalKind.SHRINK_END):
            await self.unit_of_work.run(
                partial(
                    self.assignment_repo.update,
                    assignment_id,
                    start_date=plan.kept.start_date,
                    end_date=plan.kept.end_date,
                ),
                conflict_message=ASSIGNMENT_CONFLICT_MESSAGE,
            )
            return AssignmentWeekDeleteResponse(
                kind=plan.kind,
                updated_assignment=await self._to_response(assignment_id),
            )

        # Split: shrink the original and create the second half in one transaction.
        _, second_half = await self.unit_of_work.run(
            partial(self.assignment_repo.update, assignment_id, end_date=plan.kept.end_date),
            partial(
                self.assignment_repo.create,
                employee_id=assignment.employee_id,
                project_id=assignment.project_id,
                start_date=plan.added.start_date,
                end_date=plan.added.end_date,
                utilisation=assignment.utilisation,
            ),
            conflict_message=ASSIGNMENT_CONFLICT_MESSAGE,
        )
        return AssignmentWeekDeleteResponse(
            kind=plan.kind,
            updated_assignment=await self._to_response(assignment_id),
            new_assignment=await self._to_response(second_half.id),
        )

    def split_into_weeks(self, data: AssignmentCreate) -> List[WeeklyAssignmentResponse]:
        """Preview the weekly slices of an assignment without saving anything."""
        weeks = split_into_weeks(
            employee_id=data.employee_id,
            project_id=data.project_id,
            start_date=data.start_date,
            end_date=data.end_date,
            utilisation=data.utilisation,
        )
        return [WeeklyAssignmentResponse.model_validate(week) for week in weeks]

    async def _get_or_404(self, assignment_id: int) -> Assignment:
        assignment = await self.assignment_repo.get(assignment_id)
        if assignment is None:
            raise NotFoundError("Assignment not found", details={"assignment_id": assignment_id})
        return assignment

    async def _to_response(self, assignment_id: int) -> AssignmentResponse:
        return AssignmentResponse.model_validate(await self._get_or_404(assignment_id))

    async def _ensure_references(self, employee_ids: Iterable[int], project_id: int) -> None:
        """Raise NotFoundError unless the project and every employee exist."""
        if not await self.project_repo.exists(project_id):
            raise NotFoundError("Project not found", details={"project_id": project_id})

        wanted = set(employee_ids)
        missing = sorted(wanted - await self.employee_repo.existing_ids(list(wanted)))
        if missing:
            raise NotFoundError("Employee not found", details={"employee_ids": missing})
