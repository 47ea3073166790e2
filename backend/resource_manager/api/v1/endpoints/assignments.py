"""
Assignment API endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.db.session import get_db
from resource_manager.controllers.assignment_controller import AssignmentController
from resource_manager.schemas.assignment import (
    AssignmentCreate,
    AssignmentUpdate,
    AssignmentResponse,
    AssignmentWeekDelete,
    AssignmentWeekDeleteResponse,
    BulkAssignmentCreate,
    WeeklyAssignmentResponse,
)

router = APIRouter()
# Mounted at the API root: POST /assign
bulk_router = APIRouter()


@router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    assignment_data: AssignmentCreate,
    db: AsyncSession = Depends(get_db),
) -> AssignmentResponse:
    """Create a new assignment."""
    controller = AssignmentController(db)
    return await controller.create_assignment(assignment_data)


@router.get("", response_model=List[AssignmentResponse])
async def list_assignments(
    db: AsyncSession = Depends(get_db),
) -> List[AssignmentResponse]:
    """List assignments, latest start date first."""
    controller = AssignmentController(db)
    return await controller.list_assignments()


@router.post("/weekly-breakdown", response_model=List[WeeklyAssignmentResponse])
async def weekly_breakdown(
    assignment_data: AssignmentCreate,
    db: AsyncSession = Depends(get_db),
) -> List[WeeklyAssignmentResponse]:
    """Split an assignment into Sunday-based weeks without saving it."""
    controller = AssignmentController(db)
    return controller.split_into_weeks(assignment_data)


@router.get("/{assignment_id}", response_model=AssignmentResponse)
async def get_assignment(
    assignment_id: int,
    db: AsyncSession = Depends(get_db),
) -> AssignmentResponse:
    """Get assignment by ID."""
    controller = AssignmentController(db)
    return await controller.get_assignment(assignment_id)


@router.put("/{assignment_id}", response_model=AssignmentResponse)
async def update_assignment(
    assignment_id: int,
    assignment_data: AssignmentUpdate,
    db: AsyncSession = Depends(get_db),
) -> AssignmentResponse:
    """Update an assignment."""
    controller = AssignmentController(db)
    return await controller.update_assignment(assignment_id, assignment_data)


@router.delete("/{assignment_id}/week", response_model=AssignmentWeekDeleteResponse)
async def delete_assignment_week(
    assignment_id: int,
    week_data: Optional[AssignmentWeekDelete] = Body(None),
    db: AsyncSession = Depends(get_db),
) -> AssignmentWeekDeleteResponse:
    """Remove the week starting at ``week_start`` from an assignment."""
    controller = AssignmentController(db)
    week_start = week_data.week_start if week_data else None
    return await controller.delete_assignment_week(assignment_id, week_start)


@router.delete("/{assignment_id}", response_model=AssignmentResponse)
async def delete_assignment(
    assignment_id: int,
    db: AsyncSession = Depends(get_db),
) -> AssignmentResponse:
    """Delete an assignment and return it."""
    controller = AssignmentController(db)
    return await controller.delete_assignment(assignment_id)


@bulk_router.post("/assign", response_model=List[AssignmentResponse], status_code=status.HTTP_201_CREATED)
async def assign_employees(
    bulk_data: BulkAssignmentCreate,
    db: AsyncSession = Depends(get_db),
) -> List[AssignmentResponse]:
    """Assign several employees to a project; all rows are created or none."""
    controller = AssignmentController(db)
    return await controller.create_assignments_bulk(bulk_data)
