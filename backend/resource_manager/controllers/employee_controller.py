"""
Employee controller.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.controllers.base_controller import BaseController
from resource_manager.services.employee_service import EmployeeService
from resource_manager.services.report_service import ReportService
from resource_manager.schemas.employee import (
    AvailableEmployeeResponse,
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
    EmployeeListResponse,
)


class EmployeeController(BaseController):
    """Controller for employee operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.employee_service = EmployeeService(session)
        self.report_service = ReportService(session)

    async def create_employee(self, employee_data: EmployeeCreate) -> EmployeeResponse:
        """Create a new employee."""
        return await self.employee_service.create_employee(employee_data)

    async def get_employee(self, employee_id: int) -> EmployeeResponse:
        """Get employee by ID."""
        return await self.employee_service.get_employee(employee_id)

    async def list_employees(self) -> EmployeeListResponse:
        """List employees with their assignments."""
        employees = await self.employee_service.list_employees()
        return EmployeeListResponse(items=employees, total=len(employees))

    async def search_employees(self, query: str = "", seniority: Optional[str] = None) -> EmployeeListResponse:
        """Search employees by name or skill."""
        employees = await self.employee_service.search_employees(query=query, seniority=seniority)
        return EmployeeListResponse(items=employees, total=len(employees))

    async def find_available_employees(
        self,
        start_date: Optional[str],
        end_date: Optional[str],
        availability_threshold: Optional[float] = None,
    ) -> List[AvailableEmployeeResponse]:
        """Employees with enough free capacity in the window."""
        return await self.report_service.find_available_employees(
            start_date,
            end_date,
            availability_threshold=availability_threshold,
        )

    async def update_employee(
        self,
        employee_id: int,
        employee_data: EmployeeUpdate,
    ) -> EmployeeResponse:
        """Update an employee."""
        return await self.employee_service.update_employee(employee_id, employee_data)

    async def delete_employee(self, employee_id: int) -> EmployeeResponse:
        """Delete an employee and its assignments."""
        return await self.employee_service.delete_employee(employee_id)
