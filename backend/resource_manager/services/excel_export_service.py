"""
Excel export service for utilization reports.
"""

import io
import logging
from typing import List, Optional

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.services.report_service import ReportService, parse_window
from resource_manager.utils.utilization import EmployeeAvailability

logger = logging.getLogger(__name__)

HEADER_FILL = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")
OVER_CAPACITY_FILL = PatternFill(start_color="F8CBAD", end_color="F8CBAD", fill_type="solid")

COLUMNS = [
    ("Employee ID", 12),
    ("Name", 30),
    ("Seniority", 12),
    ("Skills", 40),
    ("Current Utilization %", 22),
    ("Available Utilization %", 24),
]


class ExcelExportService:
    """Service for exporting utilization to Excel."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.report_service = ReportService(session)

    async def export_utilization_to_excel(self, start_date: Optional[str], end_date: Optional[str]) -> io.BytesIO:
        """
        Export every employee's utilization for the window as an .xlsx workbook.

        Rows where available utilization is negative are highlighted.
        """
        window_start, window_end = parse_window(start_date, end_date)
        rows = await self.report_service.compute_utilization(start_date, end_date)

        wb = Workbook()
        ws = wb.active
        ws.title = "Utilization"

        ws.cell(row=1, column=1).value = "Window"
        ws.cell(row=1, column=1).font = Font(bold=True)
        ws.cell(row=1, column=2).value = f"{window_start.isoformat()} to {window_end.isoformat()}"

        header_row = 3
        for col_idx, (title, width) in enumerate(COLUMNS, start=1):
            cell = ws.cell(row=header_row, column=col_idx)
            cell.value = title
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = HEADER_FILL
            ws.column_dimensions[get_column_letter(col_idx)].width = width

        self._write_rows(ws, rows, first_row=header_row + 1)
        ws.freeze_panes = ws.cell(row=header_row + 1, column=1)

        logger.info(
            "Utilization workbook generated",
            extra={"rows": len(rows), "window_start": window_start.isoformat(), "window_end": window_end.isoformat()},
        )

        # Save to BytesIO
        output = io.BytesIO()
        wb.save(output)
        output.seek(0)
        return output

    @staticmethod
    def _write_rows(ws, rows: List[EmployeeAvailability], first_row: int) -> None:
        for offset, item in enumerate(rows):
            row = first_row + offset
            employee = item.employee
            values = [
                employee.id,
                employee.name,
                employee.seniority.value if employee.seniority is not None else None,
                ", ".join(employee.skills) if employee.skills else None,
                item.current_utilization,
                item.available_utilization,
            ]
            for col_idx, value in enumerate(values, start=1):
                ws.cell(row=row, column=col_idx).value = value
            if item.available_utilization < 0:
                for col_idx in range(1, len(values) + 1):
                    ws.cell(row=row, column=col_idx).fill = OVER_CAPACITY_FILL
