from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from .core.engine import PresetRegistry
from .core.time import coerce_day
from .core.types import CalendarSpec, DayCell, DisplayedMonth
from .engines.calendar import CalendarEngine
from .engines.constraints import is_disabled as _is_disabled, make_constraints
from .engines.factory import make_calendar
from .engines.grid import build_grid
from .engines.interfaces import CalendarCallbacks
from .engines.labels import label as _label

_registry: Optional[PresetRegistry] = None

def set_registry(reg: PresetRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> PresetRegistry:
    if _registry is None:
        raise RuntimeError("Preset registry not initialized")
    return _registry

def list_presets() -> List[str]:
    return _reg().list()

def preset_info(name: str) -> Dict[str, Any]:
    s = _reg().get(name)
    return {
        "name": s.name,
        "mode": s.mode,
        "week_start": s.week_start,
        "label_pattern": s.label_pattern,
        "title_pattern": s.title_pattern,
        **s.meta,
    }

def register_preset(name: str, spec: CalendarSpec, *, overwrite: bool = False) -> None:
    _reg().register(name, spec, overwrite=overwrite)

def get_calendar(
    name: str = "default",
    *,
    seed: Any = None,
    initial_selection: Any = None,
    callbacks: Optional[CalendarCallbacks] = None,
    today: Optional[date] = None,
    **overrides: Any,
) -> CalendarEngine:
    """Live calendar from a named preset, e.g. get_calendar("iso-range", seed="2024-02-01")."""
    return make_calendar(
        _reg().get(name),
        seed=seed,
        initial_selection=initial_selection,
        callbacks=callbacks,
        today=today,
        **overrides,
    )

# ============================================================
# Stateless helpers
# ============================================================

def month_days(year: int, month: int, *, week_start: int = 0) -> List[date]:
    """Grid dates for a month given 1-based (year, month=1..12)."""
    return build_grid(DisplayedMonth.normalized(year, month - 1), week_start)

def month_grid(
    year: int,
    month: int,
    *,
    week_start: int = 0,
    disabled_dates: Iterable[Any] = (),
    min_date: Any = None,
    max_date: Any = None,
    label_pattern: Optional[str] = None,
) -> List[DayCell]:
    """Unselected DayCells for a month (1-based month), with disablement applied."""
    dm = DisplayedMonth.normalized(year, month - 1)
    c = make_constraints(disabled_dates, min_date, max_date)
    return [
        DayCell(
            date=d,
            in_current_month=dm.contains(d),
            disabled=_is_disabled(d, c),
            selected=False,
            label=_label(d, label_pattern),
        )
        for d in build_grid(dm, week_start)
    ]

def is_disabled(
    d: Any,
    *,
    disabled_dates: Iterable[Any] = (),
    min_date: Any = None,
    max_date: Any = None,
) -> bool:
    return _is_disabled(d, make_constraints(disabled_dates, min_date, max_date))

def label(d: Any, pattern: Optional[str] = None) -> str:
    return _label(d, pattern)

def displayed_month(seed: Any = None, *, today: Optional[date] = None) -> DisplayedMonth:
    return DisplayedMonth.of(coerce_day(seed, today=today))
