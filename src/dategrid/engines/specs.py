from __future__ import annotations

from typing import Dict

from ..core.types import CalendarSpec


# ============================================================
# WEEK CONVENTIONS
# ============================================================

SUNDAY = 0
MONDAY = 1
SATURDAY = 6


# ============================================================
# PRESETS
# ============================================================

DEFAULT = CalendarSpec(
    name="default",
    mode="single",
    week_start=SUNDAY,
    meta={"description": "Sunday-first, single date"},
)

ISO = CalendarSpec(
    name="iso",
    mode="single",
    week_start=MONDAY,
    meta={"description": "Monday-first (ISO 8601 week), single date"},
)

MULTIPLE = DEFAULT.tweak(
    name="multiple",
    mode="multiple",
    meta={"description": "Sunday-first, toggle any number of dates"},
)

RANGE = DEFAULT.tweak(
    name="range",
    mode="range",
    meta={"description": "Sunday-first, two-click date range"},
)

ISO_RANGE = ISO.tweak(
    name="iso-range",
    mode="range",
    meta={"description": "Monday-first, two-click date range"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    s.name: s for s in (DEFAULT, ISO, MULTIPLE, RANGE, ISO_RANGE)
}
