# tests/test_navigation.py

import random
from datetime import date, timedelta

import pytest

from dategrid.core.errors import InvalidConfigError
from dategrid.core.types import DisplayedMonth
from dategrid.engines.navigation import NavigationController


@pytest.fixture
def events():
    return {"month": [], "focus": []}

@pytest.fixture
def nav(events):
    return NavigationController(
        date(2024, 1, 31),
        on_month_change=events["month"].append,
        on_focus_request=events["focus"].append,
    )


def test_seed_defaults_to_today():
    today = date(2024, 5, 5)
    assert NavigationController(None, today=today).displayed == DisplayedMonth(2024, 4)
    assert NavigationController("not-a-date", today=today).displayed == DisplayedMonth(2024, 4)
    assert NavigationController().displayed == DisplayedMonth.of(date.today())

def test_page_from_31st_does_not_skip_short_month(nav, events):
    assert nav.page_month(1) == DisplayedMonth(2024, 1)
    assert events["month"] == [date(2024, 2, 1)]
    assert nav.page_month(1) == DisplayedMonth(2024, 2)
    assert events["month"] == [date(2024, 2, 1), date(2024, 3, 1)]

def test_page_across_year_boundary():
    nav = NavigationController(date(2024, 1, 15))
    assert nav.page_month(-1) == DisplayedMonth(2023, 11)
    assert nav.page_month(1) == DisplayedMonth(2024, 0)
    nav = NavigationController(date(2023, 12, 2))
    assert nav.page_month(1) == DisplayedMonth(2024, 0)

def test_page_round_trip():
    random.seed(11)
    for _ in range(300):
        d = date(1800, 1, 1) + timedelta(days=random.randint(0, 150000))
        nav = NavigationController(d)
        start = nav.displayed
        nav.page_month(1)
        nav.page_month(-1)
        assert nav.displayed == start

@pytest.mark.parametrize("direction", [0, 2, -2, True])
def test_page_rejects_other_directions(direction):
    with pytest.raises(InvalidConfigError):
        NavigationController(date(2024, 1, 1)).page_month(direction)

def test_move_focus_crosses_month(nav, events):
    mv = nav.move_focus(date(2024, 1, 31), 1)
    assert mv.focus_request.target == date(2024, 2, 1)
    assert mv.displayed_month == DisplayedMonth(2024, 1)
    assert mv.month_changed
    assert events["month"] == [date(2024, 2, 1)]
    assert events["focus"] == [date(2024, 2, 1)]

def test_move_focus_within_month(nav, events):
    mv = nav.move_focus(date(2024, 1, 10), 7)
    assert mv.focus_request.target == date(2024, 1, 17)
    assert not mv.month_changed
    assert events["month"] == []

def test_move_focus_back_across_year():
    nav = NavigationController(date(2024, 1, 3))
    mv = nav.move_focus(date(2024, 1, 3), -7)
    assert mv.focus_request.target == date(2023, 12, 27)
    assert nav.displayed == DisplayedMonth(2023, 11)

def test_move_focus_over_leap_day():
    nav = NavigationController(date(2024, 2, 28))
    assert nav.move_focus(date(2024, 2, 28), 1).focus_request.target == date(2024, 2, 29)
    assert nav.displayed == DisplayedMonth(2024, 1)
    assert nav.move_focus(date(2024, 2, 29), 1).focus_request.target == date(2024, 3, 1)
    assert nav.displayed == DisplayedMonth(2024, 2)

def test_focus_request_last_write_wins(nav):
    nav.move_focus(date(2024, 1, 10), 1)
    nav.move_focus(date(2024, 1, 11), 1)
    assert nav.pending_focus.target == date(2024, 1, 12)
    req = nav.consume_focus_request()
    assert req.target == date(2024, 1, 12)
    assert nav.consume_focus_request() is None
    # focused date persists as the roving tab stop
    assert nav.focused_date == date(2024, 1, 12)

def test_show_does_not_notify(nav, events):
    assert nav.show(date(2030, 6, 15)) == DisplayedMonth(2030, 5)
    assert nav.show("bogus") == DisplayedMonth(2030, 5)
    assert events["month"] == []

def test_displayed_month_normalization():
    assert DisplayedMonth.normalized(2024, -1) == DisplayedMonth(2023, 11)
    assert DisplayedMonth.normalized(2024, 12) == DisplayedMonth(2025, 0)
    assert DisplayedMonth.normalized(2024, -13) == DisplayedMonth(2022, 11)
    with pytest.raises(InvalidConfigError):
        DisplayedMonth(2024, 12)
