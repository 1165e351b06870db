"""
dategrid.engines.factory
------------------------
Transforms pure data specifications into live, executable CalendarEngine objects.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from dategrid.core.types import CalendarSpec
from dategrid.engines.calendar import CalendarEngine
from dategrid.engines.interfaces import CalendarCallbacks


def make_calendar(
    spec: CalendarSpec,
    *,
    seed: Any = None,
    initial_selection: Any = None,
    callbacks: Optional[CalendarCallbacks] = None,
    today: Optional[date] = None,
    **overrides: Any,
) -> CalendarEngine:
    """The universal entry point. Keyword overrides are applied to `spec` first."""
    if overrides:
        spec = spec.tweak(**overrides)
    return CalendarEngine(
        spec,
        seed=seed,
        initial_selection=initial_selection,
        callbacks=callbacks,
        today=today,
    )
