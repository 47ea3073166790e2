"""
Read-only utilization reports.

Each call loads one snapshot of the data and aggregates it in memory; there is
no locking, so a report may lag a concurrent write.
"""

from datetime import date
from typing import List, Optional, Tuple

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.core.config import settings
from resource_manager.core.exceptions import ValidationError
from resource_manager.core.logging import get_logger
from resource_manager.db.repositories.assignment_repository import AssignmentRepository
from resource_manager.db.repositories.employee_repository import EmployeeRepository
from resource_manager.schemas.common import CalendarDate, EmployeeReference
from resource_manager.schemas.employee import AvailableEmployeeResponse
from resource_manager.schemas.report import (
    OverlappingAssignmentsResponse,
    OverlappingEmployee,
    OverworkedEmployee,
    OverworkedEmployeesResponse,
)
from resource_manager.services.base_service import BaseService
from resource_manager.utils.overlaps import detect_overlaps
from resource_manager.utils.utilization import (
    EmployeeAvailability,
    compute_availability,
    find_available_employees,
    find_overworked_employees,
)

logger = get_logger(__name__)

_calendar_date = TypeAdapter(CalendarDate)


def parse_window(start_date: Optional[str], end_date: Optional[str]) -> Tuple[date, date]:
    """Parse and check a query window given as ISO strings."""
    if not start_date or not end_date:
        raise ValidationError("Start date and end date are required")
    try:
        window_start = _calendar_date.validate_python(start_date)
        window_end = _calendar_date.validate_python(end_date)
    except (PydanticValidationError, ValueError) as exc:
        raise ValidationError("Invalid date", details={"error": str(exc)})
    if window_end < window_start:
        raise ValidationError("End date must be on or after start date")
    return window_start, window_end


class ReportService(BaseService):
    """Service for utilization, availability and overlap reports."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.employee_repo = EmployeeRepository(session)
        self.assignment_repo = AssignmentRepository(session)

    async def find_available_employees(
        self,
        start_date: Optional[str],
        end_date: Optional[str],
        availability_threshold: Optional[float] = None,
    ) -> List[AvailableEmployeeResponse]:
        """
        Employees with enough free capacity in ``[start_date, end_date]``.

        An employee qualifies when available utilization is at least
        ``100 - availability_threshold``.
        """
        window_start, window_end = parse_window(start_date, end_date)
        threshold = (
            settings.DEFAULT_AVAILABILITY_THRESHOLD
            if availability_threshold is None
            else availability_threshold
        )

        employees = await self.employee_repo.list_with_assignments_in_window(window_start, window_end)
        available = find_available_employees(employees, window_start, window_end, threshold=threshold)
        logger.info(
            "Availability computed",
            extra={
                "window_start": window_start.isoformat(),
                "window_end": window_end.isoformat(),
                "threshold": threshold,
                "employees": len(employees),
                "available": len(available),
            },
        )
        return [self._availability_to_response(item) for item in available]

    async def compute_utilization(self, start_date: Optional[str], end_date: Optional[str]) -> List[EmployeeAvailability]:
        """Utilization of every employee in the window, without threshold filtering."""
        window_start, window_end = parse_window(start_date, end_date)
        employees = await self.employee_repo.list_with_assignments_in_window(window_start, window_end)
        return compute_availability(employees, window_start, window_end)

    async def find_overlapping_assignments(self) -> OverlappingAssignmentsResponse:
        """Employees whose consecutive assignments overlap, most overlaps first."""
        assignments = await self.assignment_repo.list_with_employees()
        report = detect_overlaps(assignments, limit=settings.OVERLAP_REPORT_LIMIT)
        return OverlappingAssignmentsResponse(
            total_count=report.total_count,
            top_overlapping_employees=[
                OverlappingEmployee(
                    employee=EmployeeReference.model_validate(item.employee),
                    overlap_count=item.overlap_count,
                )
                for item in report.top_overlapping_employees
            ],
        )

    async def find_overworked_employees(self) -> OverworkedEmployeesResponse:
        """Employees whose summed utilisation across all assignments exceeds the limit."""
        assignments = await self.assignment_repo.list_with_employees()
        overworked = find_overworked_employees(assignments, limit=settings.OVERWORKED_UTILIZATION_LIMIT)
        if overworked:
            logger.info("Overworked employees found", extra={"count": len(overworked)})
        return OverworkedEmployeesResponse(
            overworked_employees=[
                OverworkedEmployee(
                    employee=EmployeeReference.model_validate(item.employee),
                    total_utilization=item.total_utilization,
                )
                for item in overworked
            ]
        )

    @staticmethod
    def _availability_to_response(item: EmployeeAvailability) -> AvailableEmployeeResponse:
        employee = item.employee
        return AvailableEmployeeResponse(
            id=employee.id,
            name=employee.name,
            seniority=employee.seniority,
            skills=employee.skills or [],
            current_utilization=item.current_utilization,
            available_utilization=item.available_utilization,
        )
