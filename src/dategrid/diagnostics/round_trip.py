from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional

import dategrid
from dategrid.core.time import weekday
from dategrid.core.types import DisplayedMonth


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def check_grid(dm: DisplayedMonth, week_start: int) -> List[str]:
    days = dategrid.month_days(dm.year, dm.month + 1, week_start=week_start)
    errs = []
    if len(days) % 7:
        errs.append(f"{dm} ws={week_start}: length {len(days)} not a multiple of 7")
    if weekday(days[0]) != week_start:
        errs.append(f"{dm} ws={week_start}: first cell {days[0]} not on week start")
    inside = [d for d in days if dm.contains(d)]
    if len(inside) != len(set(inside)) or inside[0] != dm.anchor or inside[-1].day < 28:
        errs.append(f"{dm} ws={week_start}: month coverage broken")
    if any((b - a).days != 1 for a, b in zip(days, days[1:])):
        errs.append(f"{dm} ws={week_start}: grid has a gap")
    return errs


def check_paging(d: date) -> List[str]:
    cal = dategrid.get_calendar("default", seed=d)
    start = cal.displayed_month
    cal.next_month()
    cal.prev_month()
    if cal.displayed_month != start:
        return [f"{d}: page +1/-1 gave {cal.displayed_month}, expected {start}"]
    return []


def check_focus(d: date, offset: int) -> List[str]:
    seen: List[date] = []
    cal = dategrid.get_calendar(
        "default",
        seed=d,
        callbacks=dategrid.CalendarCallbacks(on_month_change=seen.append),
    )
    mv = cal.move_focus(d, offset)
    target = d + timedelta(days=offset)
    errs = []
    if mv.focus_request.target != target:
        errs.append(f"{d}{offset:+d}: focus {mv.focus_request.target}, expected {target}")
    if not cal.displayed_month.contains(target):
        errs.append(f"{d}{offset:+d}: displayed {cal.displayed_month} does not contain {target}")
    expected_changes = 0 if (target.year, target.month) == (d.year, d.month) else 1
    if len(seen) != expected_changes:
        errs.append(f"{d}{offset:+d}: {len(seen)} month changes, expected {expected_changes}")
    return errs


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        errs = check_grid(DisplayedMonth.of(d0), random.randint(0, 6))
        errs += check_paging(d0)
        errs += check_focus(d0, random.choice((-7, -1, 1, 7)))
        for e in errs:
            failures += 1
            if failures <= max_failures:
                print("FAIL", e)

    print(f"checked {N} dates in {start}..{end}: {failures} failures")
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Randomized grid / paging / focus invariant check.")
    p.add_argument("--n", type=int, default=2000)
    p.add_argument("--start", default="1900-01-01")
    p.add_argument("--end", default="2100-12-31")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--max-failures", type=int, default=20)
    args = p.parse_args(argv)

    failures = roundtrip_test(
        args.n, parse_date(args.start), parse_date(args.end), args.seed, max_failures=args.max_failures
    )
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
