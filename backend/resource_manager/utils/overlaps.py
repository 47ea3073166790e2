"""
Overlap report: how often an employee's consecutive assignments collide.

Only neighbouring assignments (after sorting by start date) are compared. Three
assignments that all overlap each other but are not adjacent in that order can
be under-counted; the report has always worked this way and consumers rely on
the numbers staying stable.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List


@dataclass
class EmployeeOverlap:
    employee: Any
    overlap_count: int


@dataclass
class OverlapReport:
    total_count: int = 0
    top_overlapping_employees: List[EmployeeOverlap] = field(default_factory=list)


def count_adjacent_overlaps(assignments: List[Any]) -> int:
    """Count neighbouring pairs where one assignment ends on or after the next starts."""
    ordered = sorted(assignments, key=lambda a: a.start_date)
    count = 0
    for current, following in zip(ordered, ordered[1:]):
        if current.end_date >= following.start_date:
            count += 1
    return count


def detect_overlaps(assignments: Iterable[Any], limit: int = 5) -> OverlapReport:
    """
    Rank employees by overlap count.

    ``total_count`` counts every employee with at least one overlap; the list
    holds the ``limit`` employees with the most.
    """
    by_employee: Dict[int, List[Any]] = OrderedDict()
    for assignment in assignments:
        by_employee.setdefault(assignment.employee_id, []).append(assignment)

    overlapping = []
    for employee_assignments in by_employee.values():
        overlap_count = count_adjacent_overlaps(employee_assignments)
        if overlap_count > 0:
            overlapping.append(
                EmployeeOverlap(
                    employee=employee_assignments[0].employee,
                    overlap_count=overlap_count,
                )
            )

    overlapping.sort(key=lambda item: item.overlap_count, reverse=True)
    return OverlapReport(
        total_count=len(overlapping),
        top_overlapping_employees=overlapping[:limit],
    )
