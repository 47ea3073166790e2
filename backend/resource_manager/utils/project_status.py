"""
Project status and requirement coverage rules.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

from resource_manager.models.project import ProjectStatus


def derive_project_status(start_date: date, end_date: Optional[date], today: Optional[date] = None) -> ProjectStatus:
    """Status as of ``today``; an open-ended project stays current once started."""
    today = today or date.today()
    if today < start_date:
        return ProjectStatus.UPCOMING
    if end_date is None or today <= end_date:
        return ProjectStatus.CURRENT
    return ProjectStatus.COMPLETED


@dataclass
class RequirementStatus:
    status: str
    coverage: float


def requirement_status(
    requirements: Iterable[Any],
    assignments: Iterable[Any],
    min_utilisation: int = 50,
) -> RequirementStatus:
    """
    How well a project's assignments cover its staffing requirements.

    An assignment fills a requirement when its employee has the required
    seniority, lists the requirement's role name among ``roles`` and works at
    least ``min_utilisation`` percent. Each requirement counts at most
    ``quantity`` matches.
    """
    requirements = list(requirements)
    if not requirements:
        return RequirementStatus(status="fulfilled", coverage=100.0)

    assignments = list(assignments)
    total_met = 0
    total_required = 0
    for requirement in requirements:
        total_required += requirement.quantity
        role_name = requirement.role.name if requirement.role is not None else None
        matching = [
            a for a in assignments
            if a.employee.seniority == requirement.seniority
            and role_name in (a.employee.roles or [])
            and a.utilisation >= min_utilisation
        ]
        total_met += min(len(matching), requirement.quantity)

    coverage = total_met / total_required * 100
    if coverage == 100:
        status = "fulfilled"
    elif coverage >= 50:
        status = "partial"
    else:
        status = "unfulfilled"
    return RequirementStatus(status=status, coverage=round(coverage, 1))
