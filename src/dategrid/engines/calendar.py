"""
dategrid.engines.calendar
-------------------------
The Orchestrator. Binds grid, constraints, selection, navigation and labels for
one host surface, and routes clicks and key presses to the right component.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from dategrid.core.errors import PatternError
from dategrid.core.time import coerce_day
from dategrid.core.types import CalendarSpec, Constraints, DayCell, DisplayedMonth, FocusMove, FocusRequest, Selection
from dategrid.engines.constraints import is_disabled, make_constraints
from dategrid.engines.grid import build_grid, week_rows, weekday_names
from dategrid.engines.interfaces import CalendarCallbacks, NavigationProtocol, SelectionProtocol
from dategrid.engines.labels import label, render
from dategrid.engines.navigation import NavigationController
from dategrid.engines.selection import make_selection

logger = logging.getLogger(__name__)

# key -> day offset
ARROW_OFFSETS: Dict[str, int] = {
    "ArrowRight": 1,
    "ArrowLeft": -1,
    "ArrowDown": 7,
    "ArrowUp": -7,
}
ACTIVATE_KEYS = ("Enter", " ")
DEFAULT_TITLE = "MMMM yyyy"


class CalendarEngine:
    """
    State for one calendar widget.

    Everything a render pass needs (`cells()`, `title()`, `weekday_names()`) is
    recomputed from current state on each call; nothing is cached.
    """
    def __init__(
        self,
        spec: CalendarSpec,
        *,
        seed: Any = None,
        initial_selection: Any = None,
        callbacks: Optional[CalendarCallbacks] = None,
        today: Optional[date] = None,
    ):
        self.spec = spec
        self.today = today
        self.callbacks = callbacks or CalendarCallbacks()
        self.constraints: Constraints = spec.constraints
        self.selection: SelectionProtocol = make_selection(spec.mode, initial_selection, today=today)
        self.nav: NavigationProtocol = NavigationController(
            seed,
            on_month_change=self._month_changed,
            on_focus_request=self._focus_requested,
            today=today,
        )

    # ---------------------------------------------------------
    # Callback relays
    # ---------------------------------------------------------

    def _month_changed(self, anchor: date) -> None:
        if self.callbacks.on_month_change is not None:
            self.callbacks.on_month_change(anchor)

    def _focus_requested(self, target: date) -> None:
        if self.callbacks.on_focus_request is not None:
            self.callbacks.on_focus_request(target)

    # ---------------------------------------------------------
    # Read side
    # ---------------------------------------------------------

    @property
    def mode(self) -> str:
        return self.spec.mode

    @property
    def displayed_month(self) -> DisplayedMonth:
        return self.nav.displayed

    @property
    def focused_date(self) -> Optional[date]:
        return self.nav.focused_date

    @property
    def value(self) -> Selection:
        return self.selection.value

    def is_disabled(self, d: date) -> bool:
        return is_disabled(d, self.constraints)

    def is_selected(self, d: date) -> bool:
        return self.selection.is_selected(d)

    def days(self) -> List[date]:
        return build_grid(self.nav.displayed, self.spec.week_start)

    def cells(self) -> List[DayCell]:
        dm = self.nav.displayed
        focused = self.nav.focused_date
        return [
            DayCell(
                date=d,
                in_current_month=dm.contains(d),
                disabled=self.is_disabled(d),
                selected=self.is_selected(d),
                focused=focused is not None and d == focused,
                label=label(d, self.spec.label_pattern),
            )
            for d in self.days()
        ]

    def weeks(self) -> List[List[DayCell]]:
        return week_rows(self.cells())

    def weekday_names(self) -> List[str]:
        return weekday_names(self.spec.week_start)

    def title(self) -> str:
        anchor = self.nav.displayed.anchor
        try:
            return render(anchor, self.spec.title_pattern)
        except PatternError as e:
            logger.debug("title pattern fallback: %s", e)
            return render(anchor, DEFAULT_TITLE)

    def announcement(self) -> str:
        """Live-region text for screen readers; empty unless a single date is selected."""
        if self.mode == "single" and self.value is not None:
            return f"Selected date: {render(self.value, 'MMMM do, yyyy')}"
        return ""

    # ---------------------------------------------------------
    # Interaction
    # ---------------------------------------------------------

    def select(self, d: Any) -> Selection:
        """
        Click on a cell. Returns the emission, or None if nothing was emitted
        (disabled date, or the anchoring click of a range). A non-date clicks today.
        """
        day = coerce_day(d, today=self.today)
        emission = self.selection.activate(day, self.constraints)
        if emission is None:
            return None
        if self.mode in ("single", "multiple") and self.callbacks.on_date_select is not None:
            self.callbacks.on_date_select(day)
        if self.callbacks.on_selection_change is not None:
            self.callbacks.on_selection_change(emission)
        return emission

    def handle_key(self, key: str, d: Any) -> bool:
        """
        Key press on the cell for `d`. Returns True when the key was handled
        (the host should then suppress the browser default).
        """
        if key in ACTIVATE_KEYS:
            self.select(d)
            return True
        offset = ARROW_OFFSETS.get(key)
        if offset is None:
            return False
        self.nav.move_focus(d, offset)
        return True

    def move_focus(self, d: Any, day_offset: int) -> FocusMove:
        return self.nav.move_focus(d, day_offset)

    def consume_focus_request(self) -> Optional[FocusRequest]:
        return self.nav.consume_focus_request()

    def page_month(self, direction: int) -> DisplayedMonth:
        return self.nav.page_month(direction)

    def next_month(self) -> DisplayedMonth:
        return self.nav.page_month(1)

    def prev_month(self) -> DisplayedMonth:
        return self.nav.page_month(-1)

    # ---------------------------------------------------------
    # Host sync (prop changes); none of these notify
    # ---------------------------------------------------------

    def set_displayed(self, seed: Any) -> DisplayedMonth:
        return self.nav.show(seed)

    def set_selection(self, initial: Any) -> None:
        self.selection.reset(initial)

    def set_constraints(
        self,
        disabled_dates: Iterable[Any] = (),
        min_date: Any = None,
        max_date: Any = None,
    ) -> None:
        self.constraints = make_constraints(disabled_dates, min_date, max_date)

    def info(self) -> Dict[str, Any]:
        return {
            "spec": self.spec.name,
            "mode": self.mode,
            "week_start": self.spec.week_start,
            "displayed_month": str(self.nav.displayed),
            "value": self.value,
        }
