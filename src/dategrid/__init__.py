"""dategrid public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_presets,
    preset_info,
    register_preset,
    get_calendar,
    month_days,
    month_grid,
    is_disabled,
    label,
    displayed_month,
)
from .core.errors import DategridError, InvalidConfigError, UnknownPresetError
from .core.types import (
    CalendarSpec,
    Constraints,
    DateRange,
    DayCell,
    DisplayedMonth,
    FocusMove,
    FocusRequest,
)
from .engines.calendar import CalendarEngine
from .engines.factory import make_calendar
from .engines.interfaces import CalendarCallbacks

__all__ = [
    "list_presets",
    "preset_info",
    "register_preset",
    "get_calendar",
    "month_days",
    "month_grid",
    "is_disabled",
    "label",
    "displayed_month",
    "DategridError",
    "InvalidConfigError",
    "UnknownPresetError",
    "CalendarSpec",
    "Constraints",
    "DateRange",
    "DayCell",
    "DisplayedMonth",
    "FocusMove",
    "FocusRequest",
    "CalendarEngine",
    "make_calendar",
    "CalendarCallbacks",
]
