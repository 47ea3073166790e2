"""
Utilization aggregation over assignments.

Two figures are computed here:

* windowed utilization: each assignment overlapping a query window counts in
  proportion to how much of the window it covers;
* total utilization: a plain sum of every assignment's percentage, regardless
  of dates. This is an audit number, not a time-correct load, and it is what
  the overworked report uses.

Nothing is clamped. An employee can sit above 100% or below 0% available.
"""

from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, List

from resource_manager.utils.intervals import clip, day_count, overlaps

FULL_CAPACITY = 100


@dataclass
class EmployeeAvailability:
    employee: Any
    current_utilization: float
    available_utilization: float


@dataclass
class OverworkedEmployee:
    employee: Any
    total_utilization: int


def assignment_weight(
    start_date: date,
    end_date: date,
    window_start: date,
    window_end: date,
) -> float:
    """
    Share of the window covered by ``[start_date, end_date]``, between 0 and 1.

    A zero-length window has no duration to divide by; an assignment covering
    that single instant counts fully, anything else counts as zero.
    """
    if not overlaps(start_date, end_date, window_start, window_end):
        return 0.0

    clipped_start, clipped_end = clip(start_date, end_date, window_start, window_end)
    if clipped_start > clipped_end:
        return 0.0

    window_days = day_count(window_start, window_end)
    if window_days == 0:
        return 1.0
    return day_count(clipped_start, clipped_end) / window_days


def windowed_utilization(assignments: Iterable[Any], window_start: date, window_end: date) -> float:
    """Sum of ``utilisation * weight`` over the assignments overlapping the window."""
    total = 0.0
    for assignment in assignments:
        weight = assignment_weight(
            assignment.start_date,
            assignment.end_date,
            window_start,
            window_end,
        )
        total += (assignment.utilisation or 0) * weight
    return total


def compute_availability(
    employees: Iterable[Any],
    window_start: date,
    window_end: date,
) -> List[EmployeeAvailability]:
    """Current and available utilization for every employee, unfiltered."""
    results = []
    for employee in employees:
        current = windowed_utilization(employee.assignments, window_start, window_end)
        results.append(
            EmployeeAvailability(
                employee=employee,
                current_utilization=round(current, 1),
                available_utilization=round(FULL_CAPACITY - current, 1),
            )
        )
    return results


def find_available_employees(
    employees: Iterable[Any],
    window_start: date,
    window_end: date,
    threshold: float = 80,
) -> List[EmployeeAvailability]:
    """
    Employees with at least ``100 - threshold`` percent free in the window.

    ``employees`` must expose an ``assignments`` collection. The result is
    sorted by available utilization, most available first.
    """
    minimum_available = FULL_CAPACITY - threshold
    available = [
        item
        for item in compute_availability(employees, window_start, window_end)
        if item.available_utilization >= minimum_available
    ]
    available.sort(key=lambda item: item.available_utilization, reverse=True)
    return available


def find_overworked_employees(
    assignments: Iterable[Any],
    limit: int = FULL_CAPACITY,
) -> List[OverworkedEmployee]:
    """
    Employees whose summed utilisation over all assignments exceeds ``limit``.

    Assignments must carry ``employee_id`` and a loaded ``employee``.
    """
    totals: "OrderedDict[int, OverworkedEmployee]" = OrderedDict()
    for assignment in assignments:
        entry = totals.get(assignment.employee_id)
        if entry is None:
            entry = OverworkedEmployee(employee=assignment.employee, total_utilization=0)
            totals[assignment.employee_id] = entry
        entry.total_utilization += assignment.utilisation or 0

    return [entry for entry in totals.values() if entry.total_utilization > limit]
