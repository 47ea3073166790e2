"""
Assignment Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from datetime import date

from resource_manager.schemas.common import CalendarDate, EmployeeSummary, ProjectSummary
from resource_manager.utils.week_utils import WeekRemovalKind


class AssignmentBase(BaseModel):
    """Base assignment schema with common fields."""
    employee_id: int
    project_id: int
    start_date: CalendarDate
    end_date: CalendarDate
    utilisation: int = Field(..., description="Percent of capacity; values above 100 are allowed")

    @model_validator(mode='after')
    def validate_dates(self) -> 'AssignmentBase':
        """Both dates are inclusive, so a single-day assignment is valid."""
        if self.end_date < self.start_date:
            raise ValueError('End date must be on or after start date')
        return self


class AssignmentCreate(AssignmentBase):
    """Schema for creating a single assignment."""
    pass


class AssignmentUpdate(AssignmentBase):
    """Schema for replacing the fields of an existing assignment."""
    pass


class BulkAssignmentCreate(BaseModel):
    """One project/date/utilisation payload applied to many employees."""
    employee_ids: List[int] = Field(default_factory=list)
    project_id: int
    start_date: CalendarDate
    end_date: CalendarDate
    utilisation: int

    @model_validator(mode='after')
    def validate_dates(self) -> 'BulkAssignmentCreate':
        if self.end_date < self.start_date:
            raise ValueError('End date must be on or after start date')
        return self


class AssignmentWeekDelete(BaseModel):
    """Request body for removing one week from an assignment."""
    week_start: Optional[CalendarDate] = None


class AssignmentResponse(BaseModel):
    """Schema for assignment response."""
    id: int
    employee_id: int
    project_id: int
    start_date: date
    end_date: date
    utilisation: int
    employee: Optional[EmployeeSummary] = None
    project: Optional[ProjectSummary] = None

    class Config:
        from_attributes = True


class AssignmentWeekDeleteResponse(BaseModel):
    """Result of removing a week: what happened and the affected rows."""
    kind: WeekRemovalKind
    deleted_assignment_id: Optional[int] = None
    updated_assignment: Optional[AssignmentResponse] = None
    new_assignment: Optional[AssignmentResponse] = None


class WeeklyAssignmentResponse(BaseModel):
    """Unsaved week slice; ``id`` is a negative placeholder."""
    id: int
    employee_id: int
    project_id: int
    start_date: date
    end_date: date
    utilisation: int

    class Config:
        from_attributes = True
