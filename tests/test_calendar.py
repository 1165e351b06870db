# tests/test_calendar.py

from datetime import date

import pytest

import dategrid
from dategrid import CalendarCallbacks, DateRange, DisplayedMonth
from dategrid.core.errors import InvalidConfigError, UnknownPresetError


@pytest.fixture
def log():
    return {"selection": [], "month": [], "focus": [], "date": []}

@pytest.fixture
def callbacks(log):
    return CalendarCallbacks(
        on_selection_change=log["selection"].append,
        on_month_change=log["month"].append,
        on_focus_request=log["focus"].append,
        on_date_select=log["date"].append,
    )


def test_presets_registered():
    assert {"default", "iso", "iso-range", "multiple", "range"} <= set(dategrid.list_presets())
    info = dategrid.preset_info("iso-range")
    assert info["mode"] == "range"
    assert info["week_start"] == 1

def test_unknown_preset():
    with pytest.raises(UnknownPresetError):
        dategrid.get_calendar("nope")
    with pytest.raises(KeyError):
        dategrid.get_calendar("nope")

def test_register_preset():
    spec = dategrid.CalendarSpec(name="sat", week_start=6)
    dategrid.register_preset("sat-test", spec)
    with pytest.raises(KeyError):
        dategrid.register_preset("sat-test", spec)
    dategrid.register_preset("sat-test", spec.tweak(mode="multiple"), overwrite=True)
    cal = dategrid.get_calendar("sat-test", seed=date(2024, 1, 1))
    assert cal.mode == "multiple"
    assert cal.weekday_names()[0] == "Sat"

def test_spec_validation():
    with pytest.raises(InvalidConfigError):
        dategrid.CalendarSpec(name="x", mode="week")
    with pytest.raises(InvalidConfigError):
        dategrid.CalendarSpec(name="x", week_start=7)
    with pytest.raises(InvalidConfigError):
        dategrid.get_calendar("default", week_start=-1)

def test_leap_february_cells():
    cal = dategrid.get_calendar("iso", seed=date(2024, 2, 14))
    cells = cal.cells()
    assert len(cells) == 35
    assert cells[0].date == date(2024, 1, 29) and not cells[0].in_current_month
    assert cells[-1].date == date(2024, 3, 3) and not cells[-1].in_current_month
    assert sum(c.in_current_month for c in cells) == 29
    assert cal.title() == "February 2024"
    assert cal.weekday_names() == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert [len(w) for w in cal.weeks()] == [7] * 5

def test_cells_carry_stable_keys_and_labels():
    cal = dategrid.get_calendar("default", seed=date(2024, 1, 1))
    cell = next(c for c in cal.cells() if c.date == date(2024, 1, 10))
    assert cell.key == 19732
    assert cell.epoch_ms == 19732 * 86_400_000
    assert cell.label == "Wednesday, January 10th, 2024"
    assert cell.day == 10

def test_range_scenario(callbacks, log):
    cal = dategrid.get_calendar("range", seed=date(2024, 1, 1), callbacks=callbacks)
    assert cal.select(date(2024, 1, 10)) is None
    assert log["selection"] == []
    assert cal.select(date(2024, 1, 5)) == DateRange(date(2024, 1, 5), date(2024, 1, 10))
    assert log["selection"] == [DateRange(date(2024, 1, 5), date(2024, 1, 10))]
    assert log["date"] == []
    selected = [c.date.day for c in cal.cells() if c.selected]
    assert selected == [5, 6, 7, 8, 9, 10]

def test_multiple_scenario(callbacks, log):
    cal = dategrid.get_calendar("multiple", seed=date(2024, 1, 1), callbacks=callbacks)
    for d in (date(2024, 1, 5), date(2024, 1, 10), date(2024, 1, 5)):
        cal.select(d)
    assert cal.value == (date(2024, 1, 10),)
    assert log["selection"][-1] == (date(2024, 1, 10),)
    assert len(log["selection"]) == 3
    assert log["date"] == [date(2024, 1, 5), date(2024, 1, 10), date(2024, 1, 5)]

def test_multiple_initial_range_is_unpacked():
    rng = DateRange(date(2024, 1, 1), date(2024, 1, 3))
    cal = dategrid.get_calendar("multiple", seed=date(2024, 1, 1), initial_selection=rng)
    assert cal.value == (date(2024, 1, 1), date(2024, 1, 3))

def test_non_date_click_selects_today(callbacks, log):
    today = date(2024, 1, 17)
    cal = dategrid.get_calendar("default", seed=date(2024, 1, 1), today=today, callbacks=callbacks)
    assert cal.select("not-a-date") == today
    assert log["selection"] == [today] and log["date"] == [today]
    assert cal.handle_key("ArrowRight", "not-a-date")
    assert cal.focused_date == date(2024, 1, 18)

def test_disabled_scenario(callbacks, log):
    cal = dategrid.get_calendar(
        "default", seed=date(2024, 1, 1), callbacks=callbacks, disabled_dates=frozenset({date(2024, 1, 1)})
    )
    assert cal.select(date(2024, 1, 1)) is None
    assert log["selection"] == [] and log["date"] == []
    assert not cal.is_selected(date(2024, 1, 1))
    cell = next(c for c in cal.cells() if c.date == date(2024, 1, 1))
    assert cell.disabled and not cell.selected

def test_keyboard_scenario(callbacks, log):
    cal = dategrid.get_calendar("default", seed=date(2024, 1, 31), callbacks=callbacks)
    assert cal.handle_key("ArrowRight", date(2024, 1, 31))
    assert log["focus"] == [date(2024, 2, 1)]
    assert cal.displayed_month == DisplayedMonth(2024, 1)
    assert log["month"] == [date(2024, 2, 1)]
    # host re-renders, then consumes the request and focuses the matching cell
    keys = {c.key: c for c in cal.cells()}
    req = cal.consume_focus_request()
    assert keys[req.key].date == date(2024, 2, 1)
    assert keys[req.key].focused
    assert cal.consume_focus_request() is None

def test_keyboard_offsets_and_activation(callbacks, log):
    cal = dategrid.get_calendar("default", seed=date(2024, 1, 15), callbacks=callbacks)
    cal.handle_key("ArrowDown", date(2024, 1, 15))
    cal.handle_key("ArrowUp", date(2024, 1, 22))
    cal.handle_key("ArrowLeft", date(2024, 1, 15))
    assert log["focus"] == [date(2024, 1, 22), date(2024, 1, 15), date(2024, 1, 14)]
    assert log["month"] == []
    assert cal.handle_key("Enter", date(2024, 1, 14))
    assert cal.handle_key(" ", date(2024, 1, 16))
    assert log["selection"] == [date(2024, 1, 14), date(2024, 1, 16)]
    assert not cal.handle_key("Tab", date(2024, 1, 16))

def test_focus_may_rest_on_disabled(callbacks, log):
    cal = dategrid.get_calendar("default", seed=date(2024, 1, 1), callbacks=callbacks, max_date=date(2024, 1, 9))
    cal.handle_key("ArrowRight", date(2024, 1, 9))
    assert log["focus"] == [date(2024, 1, 10)]
    cal.handle_key("Enter", date(2024, 1, 10))
    assert log["selection"] == []

def test_paging(callbacks, log):
    cal = dategrid.get_calendar("default", seed=date(2024, 3, 31), callbacks=callbacks)
    cal.next_month()
    cal.prev_month()
    cal.prev_month()
    assert log["month"] == [date(2024, 4, 1), date(2024, 3, 1), date(2024, 2, 1)]
    assert cal.title() == "February 2024"

def test_host_sync_does_not_notify(callbacks, log):
    cal = dategrid.get_calendar("default", today=date(2024, 1, 1), callbacks=callbacks)
    assert cal.displayed_month == DisplayedMonth(2024, 0)
    cal.set_displayed(date(2025, 7, 4))
    cal.set_selection(date(2025, 7, 4))
    cal.set_constraints(["2025-07-05"], min_date="2025-07-02")
    assert cal.displayed_month == DisplayedMonth(2025, 6)
    assert cal.is_selected(date(2025, 7, 4))
    assert cal.is_disabled(date(2025, 7, 5)) and cal.is_disabled(date(2025, 7, 1))
    assert log == {"selection": [], "month": [], "focus": [], "date": []}

def test_announcement():
    cal = dategrid.get_calendar("default", seed=date(2024, 1, 1))
    assert cal.announcement() == ""
    cal.select(date(2024, 1, 10))
    assert cal.announcement() == "Selected date: January 10th, 2024"
    rng = dategrid.get_calendar("range", initial_selection=(date(2024, 1, 1), date(2024, 1, 2)))
    assert rng.announcement() == ""

def test_bad_title_pattern_falls_back():
    cal = dategrid.get_calendar("default", seed=date(2024, 2, 1), title_pattern="YYYY")
    assert cal.title() == "February 2024"

def test_custom_label_pattern():
    cal = dategrid.get_calendar("default", seed=date(2024, 2, 1), label_pattern="EEE d")
    assert cal.cells()[4].label == "Thu 1"

def test_stateless_helpers():
    days = dategrid.month_days(2024, 2, week_start=1)
    assert (days[0], days[-1], len(days)) == (date(2024, 1, 29), date(2024, 3, 3), 35)
    cells = dategrid.month_grid(2024, 1, disabled_dates=["2024-01-01"], min_date=date(2023, 12, 31))
    assert cells[0].date == date(2023, 12, 31) and not cells[0].disabled
    assert cells[1].disabled
    assert dategrid.is_disabled(date(2024, 1, 1), disabled_dates=[date(2024, 1, 1)])
    assert not dategrid.is_disabled(date(2024, 1, 2), disabled_dates=[date(2024, 1, 1)])
    assert dategrid.label(date(2024, 1, 10), "d MMM") == "10 Jan"
    assert dategrid.displayed_month("junk", today=date(2024, 8, 8)) == DisplayedMonth(2024, 7)

def test_info():
    cal = dategrid.get_calendar("iso", seed=date(2024, 2, 1))
    info = cal.info()
    assert info["spec"] == "iso"
    assert info["displayed_month"] == "2024-02"
