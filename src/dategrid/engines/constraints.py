"""
dategrid.engines.constraints
----------------------------
Disablement rule shared by rendering and interaction. All comparisons are by
calendar day; a datetime contributes only its date.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Optional

from dategrid.core.time import parse_day
from dategrid.core.types import Constraints


def make_constraints(
    disabled_dates: Iterable[Any] = (),
    min_date: Any = None,
    max_date: Any = None,
) -> Constraints:
    """
    Build a Constraints value from loosely typed host input.

    Entries that do not parse as a date are dropped; an unparseable bound is
    treated as absent.
    """
    return Constraints(frozenset(disabled_dates or ()), min_date, max_date)


def is_disabled(d: date, constraints: Optional[Constraints]) -> bool:
    if constraints is None:
        return False
    day = parse_day(d)
    if day is None:
        return False
    if day in constraints.disabled_dates:
        return True
    if constraints.min_date is not None and day < constraints.min_date:
        return True
    if constraints.max_date is not None and day > constraints.max_date:
        return True
    return False
