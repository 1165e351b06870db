"""
dategrid.engines.interfaces
---------------------------
Boundaries between the engine components and the host that renders them.

The host never reaches into engine state: it reads DayCells, forwards clicks and
key presses, and receives results through the callbacks below.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Optional, Protocol

from dategrid.core.types import Constraints, DisplayedMonth, FocusMove, FocusRequest, Selection


class SelectionProtocol(Protocol):
    mode: str

    def activate(self, d: Any, constraints: Optional[Constraints] = None) -> Selection:
        """Returns the emission, or None when the activation emits nothing."""
        ...

    def is_selected(self, d: date) -> bool:
        ...

    @property
    def value(self) -> Selection:
        ...

    def reset(self, initial: Any = None) -> None:
        ...


class NavigationProtocol(Protocol):
    displayed: DisplayedMonth
    focused_date: Optional[date]

    def page_month(self, direction: int) -> DisplayedMonth:
        ...

    def move_focus(self, from_date: date, day_offset: int) -> FocusMove:
        ...

    def consume_focus_request(self) -> Optional[FocusRequest]:
        ...

    def show(self, seed: Any) -> DisplayedMonth:
        ...


@dataclass
class CalendarCallbacks:
    """
    Host notifications. All optional.

    on_selection_change  mode-shaped emission (date, tuple of dates, DateRange)
    on_month_change      day 1 of the new displayed month, once per transition
    on_focus_request     date the host should focus after its next render
    on_date_select       the clicked date, in single and multiple modes
    """
    on_selection_change: Optional[Callable[[Selection], None]] = None
    on_month_change: Optional[Callable[[date], None]] = None
    on_focus_request: Optional[Callable[[date], None]] = None
    on_date_select: Optional[Callable[[date], None]] = None
