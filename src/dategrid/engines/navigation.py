"""
dategrid.engines.navigation
---------------------------
Owns the displayed month and the pending keyboard focus target.

The displayed month changes only through `page_month()` or a `move_focus()` that
lands outside it. Focus requests are one-shot and last-write-wins: the host
consumes the latest one after it has re-rendered the grid.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Callable, Optional

from dateutil.relativedelta import relativedelta

from dategrid.core.errors import InvalidConfigError
from dategrid.core.time import coerce_day, parse_day
from dategrid.core.types import DisplayedMonth, FocusMove, FocusRequest

logger = logging.getLogger(__name__)

MonthListener = Callable[[date], None]
FocusListener = Callable[[date], None]


class NavigationController:
    def __init__(
        self,
        seed: Any = None,
        *,
        on_month_change: Optional[MonthListener] = None,
        on_focus_request: Optional[FocusListener] = None,
        today: Optional[date] = None,
    ):
        self.today = today
        self.displayed = DisplayedMonth.of(coerce_day(seed, today=today))
        self.focused_date: Optional[date] = None
        self.on_month_change = on_month_change
        self.on_focus_request = on_focus_request
        self._pending: Optional[FocusRequest] = None

    def _commit_month(self, dm: DisplayedMonth) -> None:
        self.displayed = dm
        logger.debug("displayed month -> %s", dm)
        if self.on_month_change is not None:
            self.on_month_change(dm.anchor)

    def page_month(self, direction: int) -> DisplayedMonth:
        """Move exactly one month back (-1) or forward (+1), anchored to day 1."""
        if isinstance(direction, bool) or direction not in (-1, 1):
            raise InvalidConfigError(f"direction must be -1 or +1, got {direction!r}")
        anchor = self.displayed.anchor + relativedelta(months=direction)
        self._commit_month(DisplayedMonth.of(anchor))
        return self.displayed

    def move_focus(self, from_date: date, day_offset: int) -> FocusMove:
        """
        Move keyboard focus by `day_offset` days (±1 horizontal, ±7 vertical).

        Disablement is not checked: focus may rest on a disabled cell, only
        activation is blocked.
        """
        target = coerce_day(from_date, today=self.today) + timedelta(days=day_offset)
        changed = not self.displayed.contains(target)
        if changed:
            self._commit_month(DisplayedMonth.of(target))
        req = FocusRequest(target)
        if self._pending is not None:
            logger.debug("focus request %s superseded by %s", self._pending.target, target)
        self._pending = req
        self.focused_date = target
        if self.on_focus_request is not None:
            self.on_focus_request(target)
        return FocusMove(self.displayed, req, month_changed=changed)

    @property
    def pending_focus(self) -> Optional[FocusRequest]:
        return self._pending

    def consume_focus_request(self) -> Optional[FocusRequest]:
        """Hand the pending request to the render layer, at most once."""
        req, self._pending = self._pending, None
        return req

    def show(self, seed: Any) -> DisplayedMonth:
        """
        Host-driven month change (e.g. a new seed prop); does not notify.
        An invalid seed leaves the displayed month where it is.
        """
        d = parse_day(seed)
        if d is not None:
            self.displayed = DisplayedMonth.of(d)
        return self.displayed
