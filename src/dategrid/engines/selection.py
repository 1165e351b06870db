"""
dategrid.engines.selection
--------------------------
Selection state machines. One engine instance runs exactly one mode:

  single    every activation emits the clicked date
  multiple  activation toggles membership and emits the whole ordered tuple
  range     two-click protocol: anchor, then commit DateRange(min, max)

`activate()` returns the emission, or None when nothing is emitted (disabled
date, or the first click of a range). A disabled date never mutates state. A
value that is not a date activates `today` instead.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Iterable, List, Optional, Tuple

from dategrid.core.errors import InvalidConfigError
from dategrid.core.time import coerce_day, parse_day
from dategrid.core.types import MODES, Constraints, DateRange, Selection
from dategrid.engines.constraints import is_disabled

logger = logging.getLogger(__name__)


class SelectionEngine(ABC):
    mode: str = ""
    today: Optional[date] = None

    def activate(self, d: Any, constraints: Optional[Constraints] = None) -> Selection:
        day = parse_day(d)
        if day is None:
            day = coerce_day(d, today=self.today)
            logger.debug("%s: non-date %r activates today (%s)", self.mode, d, day)
        if is_disabled(day, constraints):
            logger.debug("%s: ignoring activation of disabled %s", self.mode, day)
            return None
        return self._activate(day)

    @abstractmethod
    def _activate(self, d: date) -> Selection: ...

    @abstractmethod
    def is_selected(self, d: date) -> bool: ...

    @property
    @abstractmethod
    def value(self) -> Selection:
        """Current selection in the shape this mode emits."""

    @abstractmethod
    def reset(self, initial: Any = None) -> None:
        """Replace the state from host input, without emitting."""


class SingleSelection(SelectionEngine):
    mode = "single"

    def __init__(self, initial: Any = None, *, today: Optional[date] = None):
        self.today = today
        self._value: Optional[date] = None
        self.reset(initial)

    def _activate(self, d: date) -> date:
        self._value = d
        return d

    def is_selected(self, d: date) -> bool:
        return self._value is not None and parse_day(d) == self._value

    @property
    def value(self) -> Optional[date]:
        return self._value

    def reset(self, initial: Any = None) -> None:
        self._value = parse_day(initial)


class MultipleSelection(SelectionEngine):
    mode = "multiple"

    def __init__(self, initial: Any = None, *, today: Optional[date] = None):
        self.today = today
        self._values: List[date] = []
        self.reset(initial)

    def _activate(self, d: date) -> Tuple[date, ...]:
        if d in self._values:
            self._values.remove(d)
        else:
            self._values.append(d)
        return tuple(self._values)

    def is_selected(self, d: date) -> bool:
        return parse_day(d) in self._values

    @property
    def value(self) -> Tuple[date, ...]:
        return tuple(self._values)

    def reset(self, initial: Any = None) -> None:
        values: List[date] = []
        if initial is not None:
            items: Iterable[Any]
            if isinstance(initial, (date, str)):
                items = [initial]
            elif isinstance(initial, DateRange):
                items = [initial.start, initial.end]
            else:
                items = initial
            try:
                for v in items:
                    day = parse_day(v)
                    if day is not None and day not in values:
                        values.append(day)
            except TypeError:
                logger.debug("multiple: ignoring initial selection %r", initial)
                values = []
        self._values = values


class RangeSelection(SelectionEngine):
    mode = "range"

    def __init__(self, initial: Any = None, *, today: Optional[date] = None):
        self.today = today
        self.pending_anchor: Optional[date] = None
        self.committed: Optional[DateRange] = None
        self.reset(initial)

    def _activate(self, d: date) -> Optional[DateRange]:
        if self.pending_anchor is None:
            self.pending_anchor = d
            logger.debug("range: anchor %s", d)
            return None
        rng = DateRange.between(self.pending_anchor, d)
        self.committed = rng
        self.pending_anchor = None
        logger.debug("range: committed %s..%s", rng.start, rng.end)
        return rng

    def is_selected(self, d: date) -> bool:
        day = parse_day(d)
        if day is None:
            return False
        if self.pending_anchor is not None and day == self.pending_anchor:
            return True
        return self.committed is not None and self.committed.contains(day)

    @property
    def pending(self) -> bool:
        return self.pending_anchor is not None

    @property
    def value(self) -> Optional[DateRange]:
        return self.committed

    def reset(self, initial: Any = None) -> None:
        self.pending_anchor = None
        self.committed = _coerce_range(initial)


def _coerce_range(initial: Any) -> Optional[DateRange]:
    if initial is None or isinstance(initial, (str, date)):
        return None
    if isinstance(initial, DateRange):
        return initial
    if isinstance(initial, dict):
        a, b = initial.get("start"), initial.get("end")
    else:
        try:
            a, b = initial
        except (TypeError, ValueError):
            return None
    a, b = parse_day(a), parse_day(b)
    if a is None or b is None:
        return None
    return DateRange.between(a, b)


_ENGINES = {
    "single": SingleSelection,
    "multiple": MultipleSelection,
    "range": RangeSelection,
}

def make_selection(mode: str, initial: Any = None, *, today: Optional[date] = None) -> SelectionEngine:
    if mode not in _ENGINES:
        raise InvalidConfigError(f"mode must be one of {MODES}, got {mode!r}")
    return _ENGINES[mode](initial, today=today)
