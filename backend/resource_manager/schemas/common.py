"""
Shared schema types: date parsing and compact references used across resources.
"""

from datetime import date, datetime
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator

from resource_manager.models.employee import Seniority
from resource_manager.models.project import ProjectStatus


def parse_calendar_date(value: Any) -> Any:
    """
    Accept ISO-8601 dates as well as date-times; only the calendar date is kept.

    ``2024-01-15T00:00:00.000Z`` and ``2024-01-15`` both become ``date(2024, 1, 15)``.
    """
    # The offset is dropped, not applied: a client east of UTC sending
    # toISOString() of its local midnight lands one day early.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and ("T" in value or " " in value.strip()):
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
    return value


CalendarDate = Annotated[date, BeforeValidator(parse_calendar_date)]


class EmployeeReference(BaseModel):
    """Minimal employee reference for reports."""
    id: int
    name: str

    class Config:
        from_attributes = True


class EmployeeSummary(EmployeeReference):
    """Employee fields embedded in assignment responses."""
    seniority: Seniority
    skills: List[str] = []
    roles: List[str] = []


class ProjectSummary(BaseModel):
    """Project fields embedded in assignment responses."""
    id: int
    name: str
    status: ProjectStatus
    start_date: date
    end_date: Optional[date] = None

    class Config:
        from_attributes = True
