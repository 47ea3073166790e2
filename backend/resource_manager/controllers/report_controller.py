"""
Report controller.
"""

import io
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.controllers.base_controller import BaseController
from resource_manager.services.excel_export_service import ExcelExportService
from resource_manager.services.report_service import ReportService
from resource_manager.schemas.report import OverlappingAssignmentsResponse, OverworkedEmployeesResponse


class ReportController(BaseController):
    """Controller for utilization reports."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.report_service = ReportService(session)
        self.export_service = ExcelExportService(session)

    async def get_overlapping_assignments(self) -> OverlappingAssignmentsResponse:
        return await self.report_service.find_overlapping_assignments()

    async def get_overworked_employees(self) -> OverworkedEmployeesResponse:
        return await self.report_service.find_overworked_employees()

    async def export_utilization(self, start_date: Optional[str], end_date: Optional[str]) -> io.BytesIO:
        """Utilization workbook for the window."""
        return await self.export_service.export_utilization_to_excel(start_date, end_date)
