from __future__ import annotations

import argparse

import dategrid
from dategrid.core.types import DayCell
from dategrid.engines.calendar import CalendarEngine


def cell(c: DayCell, w: int = 4) -> str:
    """
    One grid cell:  `[10]` selected, `(10)` disabled, ` 10 ` plain.
    Days outside the displayed month are prefixed with `·`.
    """
    if not c.in_current_month:
        txt = f"·{c.day:2d}"
    else:
        txt = f"{c.day:2d}"
    if c.selected:
        txt = f"[{txt}]"
    elif c.disabled:
        txt = f"({txt})"
    elif c.focused:
        txt = f">{txt}"
    return txt.center(w)


def format_calendar(cal: CalendarEngine, w: int = 5) -> str:
    header = "".join(n[:2].center(w) for n in cal.weekday_names())
    lines = [cal.title().center(len(header)), header, "-" * len(header)]
    for wk in cal.weeks():
        lines.append("".join(cell(c, w) for c in wk))
    return "\n".join(lines)


def print_calendar(cal: CalendarEngine) -> None:
    print(format_calendar(cal))
    print()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month grid with selection and disablement markers."
    )
    p.add_argument("--preset", default="default", help="preset name (see `dategrid presets`)")
    p.add_argument("--month", metavar="YYYY-MM", help="month to print (default: current month)")
    p.add_argument("--count", type=int, default=1, help="number of consecutive months to print")
    args = p.parse_args(argv)

    seed = f"{args.month}-01" if args.month else None
    cal = dategrid.get_calendar(args.preset, seed=seed)
    for i in range(max(1, args.count)):
        if i:
            cal.next_month()
        print_calendar(cal)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
