"""
Employee service with business logic.
"""

from functools import partial
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.core.exceptions import NotFoundError, ValidationError
from resource_manager.core.logging import get_logger
from resource_manager.db.repositories.assignment_repository import AssignmentRepository
from resource_manager.db.repositories.employee_repository import EmployeeRepository
from resource_manager.models.employee import Employee, Seniority
from resource_manager.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from resource_manager.services.base_service import BaseService

logger = get_logger(__name__)

ALL_SENIORITIES = "ALL"


class EmployeeService(BaseService):
    """Service for employee operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.employee_repo = EmployeeRepository(session)
        self.assignment_repo = AssignmentRepository(session)

    async def create_employee(self, employee_data: EmployeeCreate) -> EmployeeResponse:
        """Create a new employee."""
        [employee] = await self.unit_of_work.run(
            partial(self.employee_repo.create, **employee_data.model_dump())
        )
        logger.info("Employee created", extra={"employee_id": employee.id})
        return await self.get_employee(employee.id)

    async def get_employee(self, employee_id: int) -> EmployeeResponse:
        """Get employee by ID with assignments."""
        employee = await self.employee_repo.get_with_assignments(employee_id)
        if not employee:
            raise NotFoundError("Employee not found", details={"employee_id": employee_id})
        return EmployeeResponse.model_validate(employee)

    async def list_employees(self) -> List[EmployeeResponse]:
        """List employees with their assignments and projects."""
        employees = await self.employee_repo.list_with_assignments()
        return [EmployeeResponse.model_validate(e) for e in employees]

    async def search_employees(self, query: str = "", seniority: Optional[str] = None) -> List[EmployeeResponse]:
        """
        Search employees.

        ``query`` matches a name case-insensitively or a skill label exactly.
        ``seniority`` filters by level unless it is empty or ``ALL``.
        """
        seniority_filter = None
        if seniority and seniority != ALL_SENIORITIES:
            try:
                seniority_filter = Seniority(seniority)
            except ValueError:
                raise ValidationError(
                    "Invalid seniority",
                    details={"seniority": seniority, "allowed": [s.value for s in Seniority] + [ALL_SENIORITIES]},
                )

        employees = await self.employee_repo.list_with_assignments(seniority=seniority_filter)
        if query:
            employees = [e for e in employees if self._matches(e, query)]
        return [EmployeeResponse.model_validate(e) for e in employees]

    async def update_employee(self, employee_id: int, employee_data: EmployeeUpdate) -> EmployeeResponse:
        """Update an employee."""
        if not await self.employee_repo.exists(employee_id):
            raise NotFoundError("Employee not found", details={"employee_id": employee_id})

        update_dict = employee_data.model_dump(exclude_unset=True)
        # Label lists may be cleared with null; name and seniority may not.
        for key in ("skills", "roles"):
            if key in update_dict and update_dict[key] is None:
                update_dict[key] = []
        update_dict = {k: v for k, v in update_dict.items() if v is not None}

        if update_dict:
            await self.unit_of_work.run(partial(self.employee_repo.update, employee_id, **update_dict))
            logger.info("Employee updated", extra={"employee_id": employee_id, "fields": sorted(update_dict)})
        return await self.get_employee(employee_id)

    async def delete_employee(self, employee_id: int) -> EmployeeResponse:
        """Delete an employee together with all of its assignments."""
        deleted = await self.get_employee(employee_id)
        removed_assignments, _ = await self.unit_of_work.run(
            partial(self.assignment_repo.delete_many, employee_id=employee_id),
            partial(self.employee_repo.delete, employee_id),
        )
        logger.info(
            "Employee deleted",
            extra={"employee_id": employee_id, "assignments_removed": removed_assignments},
        )
        return deleted

    @staticmethod
    def _matches(employee: Employee, query: str) -> bool:
        return query.lower() in employee.name.lower() or query in (employee.skills or [])
