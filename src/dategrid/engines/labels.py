"""
dategrid.engines.labels
-----------------------
Human-readable labels for grid cells (aria-label text).

Patterns use date-fns style tokens: runs of one letter (`yyyy`, `MMMM`, `EEE`),
ordinals (`do`, `Mo`, `Qo`) and single-quoted literals (`'of'`, `''` for a quote).
Cells carry no time of day, so clock tokens render midnight.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Tuple

from dategrid.core.errors import PatternError
from dategrid.core.time import coerce_day, weekday

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "EEEE, MMMM do, yyyy"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# date-fns rejects these without an explicit opt-in
PROTECTED = ("D", "DD")


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _year(d: date, n: int, o: bool) -> str:
    if n == 2:
        return f"{d.year % 100:02d}"
    return str(d.year).zfill(n)

def _quarter(d: date, n: int, o: bool) -> str:
    q = (d.month - 1) // 3 + 1
    if o:
        return ordinal(q)
    if n <= 2:
        return str(q).zfill(n)
    if n == 3:
        return f"Q{q}"
    return f"{ordinal(q)} quarter"

def _month(d: date, n: int, o: bool) -> str:
    if o:
        return ordinal(d.month)
    if n <= 2:
        return str(d.month).zfill(n)
    name = MONTH_NAMES[d.month - 1]
    return {3: name[:3], 4: name, 5: name[0]}.get(n, name)

def _day(d: date, n: int, o: bool) -> str:
    if o:
        return ordinal(d.day)
    return str(d.day).zfill(n)

def _day_of_year(d: date, n: int, o: bool) -> str:
    doy = d.timetuple().tm_yday
    if o:
        return ordinal(doy)
    return str(doy).zfill(n)

def _weekday(d: date, n: int, o: bool) -> str:
    name = WEEKDAY_NAMES[weekday(d)]
    if n <= 3:
        return name[:3]
    return {4: name, 5: name[0], 6: name[:2]}.get(n, name)

def _iso_weekday(d: date, n: int, o: bool) -> str:
    i = d.isoweekday()
    if o:
        return ordinal(i)
    if n <= 2:
        return str(i).zfill(n)
    return _weekday(d, n, False)

def _hour24(d: date, n: int, o: bool) -> str:
    return "0".zfill(n)

def _hour12(d: date, n: int, o: bool) -> str:
    return "12".zfill(n)

def _zero(d: date, n: int, o: bool) -> str:
    return "0".zfill(n)

def _ampm(d: date, n: int, o: bool) -> str:
    return "AM"

Renderer = Callable[[date, int, bool], str]

# letter -> (renderer, max run length, ordinal allowed)
TOKENS: Dict[str, Tuple[Renderer, int, bool]] = {
    "y": (_year, 4, False),
    "Q": (_quarter, 4, True),
    "M": (_month, 5, True),
    "d": (_day, 2, True),
    "D": (_day_of_year, 3, True),
    "E": (_weekday, 6, False),
    "i": (_iso_weekday, 6, True),
    "H": (_hour24, 2, False),
    "h": (_hour12, 2, False),
    "m": (_zero, 2, False),
    "s": (_zero, 2, False),
    "a": (_ampm, 3, False),
}


def tokenize(pattern: str) -> List[Tuple[str, Any]]:
    """
    Split a pattern into ("lit", text) and ("tok", (letter, run, ordinal)) parts.

    Raises PatternError on unterminated quotes and unknown or protected letters.
    """
    out: List[Tuple[str, Any]] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == "'":
            if pattern.startswith("''", i):
                out.append(("lit", "'"))
                i += 2
                continue
            j = i + 1
            buf = []
            while True:
                if j >= n:
                    raise PatternError(f"unterminated quote at position {i} in {pattern!r}")
                if pattern[j] == "'":
                    if pattern.startswith("''", j):
                        buf.append("'")
                        j += 2
                        continue
                    break
                buf.append(pattern[j])
                j += 1
            out.append(("lit", "".join(buf)))
            i = j + 1
            continue
        if c.isascii() and c.isalpha():
            j = i
            while j < n and pattern[j] == c:
                j += 1
            run = j - i
            if c not in TOKENS:
                raise PatternError(f"unknown token {c * run!r} in {pattern!r}")
            _, max_run, ordinal_ok = TOKENS[c]
            if run > max_run and c != "y":
                raise PatternError(f"token {c * run!r} is too long in {pattern!r}")
            is_ord = ordinal_ok and run == 1 and j < n and pattern[j] == "o"
            if is_ord:
                j += 1
            elif c * run in PROTECTED:
                raise PatternError(f"protected token {c * run!r} in {pattern!r}")
            out.append(("tok", (c, run, is_ord)))
            i = j
            continue
        # literal run up to the next quote or letter
        j = i
        while j < n and pattern[j] != "'" and not (pattern[j].isascii() and pattern[j].isalpha()):
            j += 1
        out.append(("lit", pattern[i:j]))
        i = j
    return out


def render(d: date, pattern: str) -> str:
    """Strict rendering: raises PatternError on a malformed pattern."""
    if not isinstance(pattern, str):
        raise PatternError(f"pattern must be a string, got {type(pattern).__name__}")
    parts = []
    for kind, val in tokenize(pattern):
        if kind == "lit":
            parts.append(val)
        else:
            letter, run, is_ord = val
            fn = TOKENS[letter][0]
            parts.append(fn(d, run, is_ord))
    return "".join(parts)


def label(d: Any, pattern: Optional[str] = None) -> str:
    """
    Accessibility label for a calendar day. Never raises.

    Without a pattern (None or empty) the long form is used, e.g.
    "Wednesday, January 10th, 2024". A pattern that fails to render falls back to
    the same long form.
    """
    day = coerce_day(d)
    if pattern == "":
        pattern = None
    if pattern is not None:
        try:
            return render(day, pattern)
        except PatternError as e:
            logger.debug("label pattern fallback: %s", e)
    return render(day, DEFAULT_PATTERN)
