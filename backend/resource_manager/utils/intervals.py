"""
Closed-interval helpers used by the utilization and scheduling code.
All functions accept ``date`` or ``datetime`` values, as long as both
ends of every interval share a type.
"""

from datetime import date, timedelta
from typing import Tuple, TypeVar

DateLike = TypeVar("DateLike", bound=date)

SECONDS_PER_DAY = 86400.0


def overlaps(a_start: DateLike, a_end: DateLike, b_start: DateLike, b_end: DateLike) -> bool:
    """
    Check whether two closed intervals share at least one instant.

    Touching endpoints count as overlapping, so ``[1, 5]`` and ``[5, 9]`` overlap.
    """
    return a_start <= b_end and a_end >= b_start


def clip(
    start: DateLike,
    end: DateLike,
    window_start: DateLike,
    window_end: DateLike,
) -> Tuple[DateLike, DateLike]:
    """
    Clip an interval to a window.

    The result is empty when ``clipped_start > clipped_end``; callers must check.
    """
    return max(start, window_start), min(end, window_end)


def day_count(start: DateLike, end: DateLike) -> float:
    """Length of ``[start, end]`` in days, fractional when times are involved."""
    delta: timedelta = end - start
    return delta.total_seconds() / SECONDS_PER_DAY
