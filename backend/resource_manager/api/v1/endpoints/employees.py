"""
Employee API endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.db.session import get_db
from resource_manager.controllers.employee_controller import EmployeeController
from resource_manager.schemas.employee import (
    AvailableEmployeeResponse,
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
    EmployeeListResponse,
)

router = APIRouter()


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_data: EmployeeCreate,
    db: AsyncSession = Depends(get_db),
) -> EmployeeResponse:
    """Create a new employee."""
    controller = EmployeeController(db)
    return await controller.create_employee(employee_data)


@router.get("", response_model=EmployeeListResponse)
async def list_employees(
    db: AsyncSession = Depends(get_db),
) -> EmployeeListResponse:
    """List employees."""
    controller = EmployeeController(db)
    return await controller.list_employees()


@router.get("/available", response_model=List[AvailableEmployeeResponse])
async def find_available_employees(
    start_date: Optional[str] = Query(None),
    end_date: Optional[str] = Query(None),
    availability_threshold: Optional[float] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> List[AvailableEmployeeResponse]:
    """
    Employees with at least ``100 - availability_threshold`` percent free
    capacity between ``start_date`` and ``end_date``, most available first.
    """
    controller = EmployeeController(db)
    return await controller.find_available_employees(start_date, end_date, availability_threshold)


@router.get("/search", response_model=EmployeeListResponse)
async def search_employees(
    q: str = Query(""),
    seniority: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> EmployeeListResponse:
    """Search employees by name or exact skill, optionally by seniority."""
    controller = EmployeeController(db)
    return await controller.search_employees(query=q, seniority=seniority)


@router.get("/with-assignments", response_model=List[EmployeeResponse])
async def list_employees_with_assignments(
    db: AsyncSession = Depends(get_db),
) -> List[EmployeeResponse]:
    """Employees with their assignments and the assigned projects."""
    controller = EmployeeController(db)
    listing = await controller.list_employees()
    return listing.items


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
) -> EmployeeResponse:
    """Get employee by ID."""
    controller = EmployeeController(db)
    return await controller.get_employee(employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    employee_data: EmployeeUpdate,
    db: AsyncSession = Depends(get_db),
) -> EmployeeResponse:
    """Update an employee."""
    controller = EmployeeController(db)
    return await controller.update_employee(employee_id, employee_data)


@router.delete("/{employee_id}", response_model=EmployeeResponse)
async def delete_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
) -> EmployeeResponse:
    """Delete an employee together with its assignments."""
    controller = EmployeeController(db)
    return await controller.delete_employee(employee_id)
