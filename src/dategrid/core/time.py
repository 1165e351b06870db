from __future__ import annotations
from datetime import date, datetime
from typing import Any, Optional

from dateutil import parser as date_parser

# JDN of 1970-01-01
JDN_UNIX_EPOCH = 2440588
MS_PER_DAY = 86_400_000


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def weekday(d: date) -> int:
    """Day of week with 0=Sunday..6=Saturday."""
    return (to_jdn(d) + 1) % 7

def epoch_day(d: date) -> int:
    """Days since 1970-01-01. Stable per-cell key for the render layer."""
    return to_jdn(d) - JDN_UNIX_EPOCH

def from_epoch_day(n: int) -> date:
    return from_jdn(n + JDN_UNIX_EPOCH)

def epoch_ms(d: date) -> int:
    """Milliseconds since the epoch at UTC midnight of the calendar day."""
    return epoch_day(d) * MS_PER_DAY

def same_day(a: date, b: date) -> bool:
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def parse_day(value: Any) -> Optional[date]:
    """
    Normalize a caller-supplied value to a calendar day.

    Accepts `date`, `datetime` (time of day is dropped) and date strings
    (anything dateutil can parse). Returns None for anything else.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        try:
            return date_parser.isoparse(s).date()
        except (ValueError, OverflowError):
            pass
        try:
            return date_parser.parse(s).date()
        except (ValueError, OverflowError):
            return None
    return None

def coerce_day(value: Any, *, today: Optional[date] = None) -> date:
    """Like parse_day, but falls back to today for absent or invalid input."""
    d = parse_day(value)
    if d is not None:
        return d
    return today if today is not None else date.today()
