"""
Project Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from datetime import date

from resource_manager.models.employee import Seniority
from resource_manager.models.project import ProjectStatus, Satisfaction
from resource_manager.schemas.common import CalendarDate, EmployeeSummary


class RequirementCreate(BaseModel):
    """Staffing need attached to a project."""
    role_id: int
    seniority: Seniority
    start_date: CalendarDate
    end_date: CalendarDate
    quantity: int = Field(1, ge=1)

    @model_validator(mode='after')
    def validate_dates(self) -> 'RequirementCreate':
        if self.end_date < self.start_date:
            raise ValueError('End date must be on or after start date')
        return self


class RequirementResponse(BaseModel):
    """Requirement as stored."""
    id: int
    role_id: int
    role_name: Optional[str] = None
    seniority: Seniority
    start_date: date
    end_date: date
    quantity: int


class ProjectBase(BaseModel):
    """Base project schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    start_date: CalendarDate
    end_date: Optional[CalendarDate] = None
    type: Optional[str] = Field(None, max_length=100)
    tools: List[str] = Field(default_factory=list)
    client_satisfaction: Satisfaction = Satisfaction.IDK

    @model_validator(mode='after')
    def validate_dates(self) -> 'ProjectBase':
        """An open-ended project has no end date."""
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError('End date must be on or after start date')
        return self


class ProjectCreate(ProjectBase):
    """Schema for creating a project together with its requirements."""
    requirements: List[RequirementCreate] = Field(default_factory=list)


class ProjectUpdate(ProjectBase):
    """
    Schema for replacing a project's fields.

    ``requirements`` replaces the stored list when given and leaves it alone when omitted.
    """
    requirements: Optional[List[RequirementCreate]] = None


class ProjectAssignment(BaseModel):
    """Assignment as seen from the project side."""
    id: int
    employee_id: int
    start_date: date
    end_date: date
    utilisation: int
    employee: Optional[EmployeeSummary] = None

    class Config:
        from_attributes = True


class ProjectResponse(ProjectBase):
    """Schema for project response."""
    id: int
    status: ProjectStatus
    assignments: List[ProjectAssignment] = []
    requirements: List[RequirementResponse] = []


class ProjectListResponse(BaseModel):
    """Schema for project list response."""
    items: List[ProjectResponse]
    total: int


class RequirementStatusResponse(BaseModel):
    """Coverage of a project's requirements by its assignments."""
    project_id: int
    status: str
    coverage: float
