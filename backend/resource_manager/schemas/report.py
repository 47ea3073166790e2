"""
Report Pydantic schemas.
"""

from pydantic import BaseModel
from typing import List

from resource_manager.schemas.common import EmployeeReference


class OverlappingEmployee(BaseModel):
    employee: EmployeeReference
    overlap_count: int


class OverlappingAssignmentsResponse(BaseModel):
    """Employees whose consecutive assignments overlap."""
    total_count: int
    top_overlapping_employees: List[OverlappingEmployee]


class OverworkedEmployee(BaseModel):
    employee: EmployeeReference
    total_utilization: int


class OverworkedEmployeesResponse(BaseModel):
    """Employees whose summed utilisation exceeds the limit."""
    overworked_employees: List[OverworkedEmployee]
