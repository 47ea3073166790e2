"""
Report API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.db.session import get_db
from resource_manager.controllers.report_controller import ReportController
from resource_manager.schemas.report import OverlappingAssignmentsResponse, OverworkedEmployeesResponse

router = APIRouter()


@router.get("/overlapping-assignments", response_model=OverlappingAssignmentsResponse)
async def get_overlapping_assignments(
    db: AsyncSession = Depends(get_db),
) -> OverlappingAssignmentsResponse:
    """Total overlap count and the employees with the most overlaps."""
    controller = ReportController(db)
    return await controller.get_overlapping_assignments()


@router.get("/overworked-employees", response_model=OverworkedEmployeesResponse)
async def get_overworked_employees(
    db: AsyncSession = Depends(get_db),
) -> OverworkedEmployeesResponse:
    """Employees whose summed utilisation is above the limit."""
    controller = ReportController(db)
    return await controller.get_overworked_employees()


@router.get("/utilization/export")
async def export_utilization(
    start_date: Optional[str] = Query(None),
    end_date: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Download utilization of every employee in the window as Excel."""
    controller = ReportController(db)
    output = await controller.export_utilization(start_date, end_date)
    return StreamingResponse(
        output,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={
            "Content-Disposition": f"attachment; filename=utilization_{start_date}_{end_date}.xlsx"
        },
    )
