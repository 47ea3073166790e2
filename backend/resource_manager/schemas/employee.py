"""
Employee Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date

from resource_manager.models.employee import Seniority
from resource_manager.schemas.common import ProjectSummary


class EmployeeBase(BaseModel):
    """Base employee schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    seniority: Seniority = Field(...)
    skills: List[str] = Field(default_factory=list)
    roles: List[str] = Field(default_factory=list)


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee."""
    pass


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    seniority: Optional[Seniority] = None
    skills: Optional[List[str]] = None
    roles: Optional[List[str]] = None


class EmployeeAssignment(BaseModel):
    """Assignment as seen from the employee side."""
    id: int
    project_id: int
    start_date: date
    end_date: date
    utilisation: int
    project: Optional[ProjectSummary] = None

    class Config:
        from_attributes = True


class EmployeeResponse(EmployeeBase):
    """Schema for employee response."""
    id: int
    assignments: List[EmployeeAssignment] = []

    class Config:
        from_attributes = True


class EmployeeListResponse(BaseModel):
    """Schema for employee list response."""
    items: List[EmployeeResponse]
    total: int


class AvailableEmployeeResponse(BaseModel):
    """Employee with utilization figures for a query window."""
    id: int
    name: str
    seniority: Seniority
    skills: List[str] = []
    current_utilization: float
    available_utilization: float
