from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, FrozenSet, Literal, Optional, Tuple, Union

from .errors import InvalidConfigError
from .time import epoch_day, epoch_ms, parse_day

Mode = Literal["single", "multiple", "range"]
MODES: Tuple[str, ...] = ("single", "multiple", "range")

@dataclass(frozen=True, order=True)
class DisplayedMonth:
    """A month of the Gregorian calendar. `month` is 0-based (0=January..11=December)."""
    year: int
    month: int

    def __post_init__(self):
        if not 0 <= self.month <= 11:
            raise InvalidConfigError(f"month must be in 0..11, got {self.month}; use DisplayedMonth.normalized()")

    @classmethod
    def normalized(cls, year: int, month: int) -> DisplayedMonth:
        """Fold any integer month into range, e.g. (2024, -1) -> (2023, 11)."""
        dy, m = divmod(month, 12)
        return cls(year + dy, m)

    @classmethod
    def of(cls, d: date) -> DisplayedMonth:
        return cls(d.year, d.month - 1)

    @property
    def anchor(self) -> date:
        """Day 1 of the month."""
        return date(self.year, self.month + 1, 1)

    def contains(self, d: date) -> bool:
        return d.year == self.year and d.month - 1 == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}"

@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise InvalidConfigError(f"range end {self.end} precedes start {self.start}")

    @classmethod
    def between(cls, a: date, b: date) -> DateRange:
        """Order-insensitive constructor."""
        return cls(min(a, b), max(a, b))

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

@dataclass(frozen=True)
class Constraints:
    disabled_dates: FrozenSet[date] = frozenset()
    min_date: Optional[date] = None
    max_date: Optional[date] = None

    def __post_init__(self):
        # normalized to calendar days so membership and bounds ignore time of day
        days = frozenset(d for d in map(parse_day, self.disabled_dates) if d is not None)
        object.__setattr__(self, "disabled_dates", days)
        object.__setattr__(self, "min_date", parse_day(self.min_date))
        object.__setattr__(self, "max_date", parse_day(self.max_date))

@dataclass(frozen=True)
class FocusRequest:
    target: date

    @property
    def key(self) -> int:
        return epoch_day(self.target)

@dataclass(frozen=True)
class FocusMove:
    displayed_month: DisplayedMonth
    focus_request: FocusRequest
    month_changed: bool = False

@dataclass(frozen=True)
class DayCell:
    date: date
    in_current_month: bool
    disabled: bool
    selected: bool
    focused: bool = False
    label: str = ""

    @property
    def key(self) -> int:
        return epoch_day(self.date)

    @property
    def epoch_ms(self) -> int:
        return epoch_ms(self.date)

    @property
    def day(self) -> int:
        return self.date.day

Selection = Union[None, date, Tuple[date, ...], DateRange]

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar engine."""
    name: str
    mode: Mode = "single"
    week_start: int = 0
    label_pattern: Optional[str] = None
    title_pattern: str = "MMMM yyyy"
    disabled_dates: FrozenSet[date] = frozenset()
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    meta: dict = field(default_factory=dict, compare=False)

    def __post_init__(self):
        if self.mode not in MODES:
            raise InvalidConfigError(f"mode must be one of {MODES}, got {self.mode!r}")
        if isinstance(self.week_start, bool) or not isinstance(self.week_start, int) or not 0 <= self.week_start <= 6:
            raise InvalidConfigError(f"week_start must be an integer in 0..6, got {self.week_start!r}")
        c = Constraints(frozenset(self.disabled_dates), self.min_date, self.max_date)
        object.__setattr__(self, "disabled_dates", c.disabled_dates)
        object.__setattr__(self, "min_date", c.min_date)
        object.__setattr__(self, "max_date", c.max_date)

    @property
    def constraints(self) -> Constraints:
        return Constraints(self.disabled_dates, self.min_date, self.max_date)

    def tweak(self, **changes: Any) -> CalendarSpec:
        return replace(self, **changes)
