"""
Week arithmetic for assignments.

Weeks start on Sunday. ``plan_week_removal`` decides what happens to an
assignment when one week is cut out of it; ``split_into_weeks`` breaks a span
into week-aligned granules before they are persisted.
"""

import enum
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

DAYS_PER_WEEK = 7
ONE_DAY = timedelta(days=1)


class WeekRemovalKind(str, enum.Enum):
    """Outcome of removing a week from an assignment."""
    DELETE = "delete"
    SHRINK_START = "shrink_start"
    SHRINK_END = "shrink_end"
    SPLIT = "split"


@dataclass(frozen=True)
class DateSpan:
    start_date: date
    end_date: date


@dataclass(frozen=True)
class WeekRemovalPlan:
    """
    What to do with an assignment after a week is removed.

    ``kept`` is the new span of the original assignment (None when it is deleted),
    ``added`` is the span of the second half created by a split.
    """
    kind: WeekRemovalKind
    kept: Optional[DateSpan] = None
    added: Optional[DateSpan] = None


@dataclass(frozen=True)
class WeeklyAssignment:
    """One week-sized slice of an assignment that has not been persisted yet."""
    id: int
    employee_id: int
    project_id: int
    start_date: date
    end_date: date
    utilisation: int


def week_end_for(week_start: date) -> date:
    """Last (inclusive) day of the seven-day week starting at ``week_start``."""
    return week_start + timedelta(days=DAYS_PER_WEEK - 1)


def start_of_week(day: date) -> date:
    """Sunday on or before ``day``."""
    days_since_sunday = (day.weekday() + 1) % DAYS_PER_WEEK
    return day - timedelta(days=days_since_sunday)


def plan_week_removal(start_date: date, end_date: date, week_start: date) -> Optional[WeekRemovalPlan]:
    """
    Classify the removal of ``[week_start, week_start + 6]`` from ``[start_date, end_date]``.

    Cases are tested in order and the first match wins; the fully contained
    check has to come first so a one-week assignment is deleted rather than
    shifted past its own end. Returns None when the week does not touch the
    assignment at all.
    """
    week_end = week_end_for(week_start)

    if start_date >= week_start and end_date <= week_end:
        return WeekRemovalPlan(kind=WeekRemovalKind.DELETE)

    if week_start <= start_date <= week_end:
        return WeekRemovalPlan(
            kind=WeekRemovalKind.SHRINK_START,
            kept=DateSpan(week_end + ONE_DAY, end_date),
        )

    if week_start <= end_date <= week_end:
        return WeekRemovalPlan(
            kind=WeekRemovalKind.SHRINK_END,
            kept=DateSpan(start_date, week_start - ONE_DAY),
        )

    if start_date < week_start and end_date > week_end:
        return WeekRemovalPlan(
            kind=WeekRemovalKind.SPLIT,
            kept=DateSpan(start_date, week_start - ONE_DAY),
            added=DateSpan(week_end + ONE_DAY, end_date),
        )

    return None


def split_into_weeks(
    employee_id: int,
    project_id: int,
    start_date: date,
    end_date: date,
    utilisation: int,
) -> List[WeeklyAssignment]:
    """
    Break ``[start_date, end_date]`` into consecutive Sunday-aligned weeks.

    Each slice is clipped to the original span and gets a negative placeholder
    id; the store assigns real ids on insert.
    """
    weeks: List[WeeklyAssignment] = []
    week_start = start_of_week(start_date)
    index = 1
    while week_start <= end_date:
        week_end = week_end_for(week_start)
        weeks.append(
            WeeklyAssignment(
                id=-index,
                employee_id=employee_id,
                project_id=project_id,
                start_date=max(start_date, week_start),
                end_date=min(end_date, week_end),
                utilisation=utilisation,
            )
        )
        week_start += timedelta(days=DAYS_PER_WEEK)
        index += 1
    return weeks
