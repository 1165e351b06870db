"""
dategrid.engines.grid
---------------------
Week-aligned month grid. A grid always spans whole weeks: the first cell falls on
the configured week start, the last on the day before it.

Weekday convention throughout: 0=Sunday..6=Saturday.
"""

from __future__ import annotations

import calendar as pycal
from datetime import date, timedelta
from typing import List

from dategrid.core.errors import InvalidConfigError
from dategrid.core.time import weekday
from dategrid.core.types import DisplayedMonth

WEEKDAY_ABBR = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def _check_week_start(week_start: int) -> int:
    if isinstance(week_start, bool) or not isinstance(week_start, int) or not 0 <= week_start <= 6:
        raise InvalidConfigError(f"week_start must be an integer in 0..6, got {week_start!r}")
    return week_start


def month_end(dm: DisplayedMonth) -> date:
    last_day = pycal.monthrange(dm.year, dm.month + 1)[1]
    return date(dm.year, dm.month + 1, last_day)


def grid_bounds(dm: DisplayedMonth, week_start: int = 0) -> tuple[date, date]:
    """First and last date of the grid for `dm`."""
    week_start = _check_week_start(week_start)
    first = dm.anchor
    last = month_end(dm)
    lead = (weekday(first) - week_start + 7) % 7
    week_end = (week_start + 6) % 7
    trail = (week_end - weekday(last) + 7) % 7
    return first - timedelta(days=lead), last + timedelta(days=trail)


def build_grid(dm: DisplayedMonth, week_start: int = 0) -> List[date]:
    """
    Every date from the grid start to the grid end, ascending.

    The result covers each day of `dm` exactly once, padded with the minimum
    number of days from the adjacent months to complete the first and last
    week rows, so its length is 28, 35 or 42.
    """
    start, end = grid_bounds(dm, week_start)
    n = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(n)]


def week_rows(days: List[date]) -> List[List[date]]:
    return [days[i : i + 7] for i in range(0, len(days), 7)]


def weekday_names(week_start: int = 0) -> List[str]:
    """Column headers rotated so that column 0 is `week_start`."""
    week_start = _check_week_start(week_start)
    return list(WEEKDAY_ABBR[week_start:] + WEEKDAY_ABBR[:week_start])
