from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_ym(s: str) -> date:
    y, m = map(int, s.split("-")[:2])
    return date(y, m, 1)


def _setup_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _leading_verbosity(argv: list[str]) -> tuple[int, int]:
    """Count leading -v/-vv/--verbose flags; returns (verbosity, index of first other arg)."""
    verbose = 0
    i = 0
    while i < len(argv):
        a = argv[i]
        if a == "--verbose":
            verbose += 1
        elif re.fullmatch(r"-v+", a):
            verbose += len(a) - 1
        else:
            break
        i += 1
    return verbose, i


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_month(argv: list[str]) -> int:
    import dategrid
    from dategrid.diagnostics.pretty_month import print_calendar

    p = argparse.ArgumentParser(prog="dategrid month", description="Print a month grid")
    p.add_argument("month", help="YYYY-MM")
    p.add_argument("--preset", default="default")
    p.add_argument("--week-start", type=int, choices=range(7), help="0=Sunday..6=Saturday (overrides preset)")
    p.add_argument("--mode", choices=["single", "multiple", "range"], help="overrides preset")
    p.add_argument("--select", action="append", default=[], metavar="YYYY-MM-DD", help="click a date (repeatable)")
    p.add_argument("--disable", action="append", default=[], metavar="YYYY-MM-DD", help="disabled date (repeatable)")
    p.add_argument("--min", dest="min_date", metavar="YYYY-MM-DD")
    p.add_argument("--max", dest="max_date", metavar="YYYY-MM-DD")
    p.add_argument("--pattern", help="label pattern for --labels")
    p.add_argument("--labels", action="store_true", help="also list the accessibility label of every cell")
    args = p.parse_args(argv)

    overrides = {}
    if args.week_start is not None:
        overrides["week_start"] = args.week_start
    if args.mode is not None:
        overrides["mode"] = args.mode
    if args.pattern is not None:
        overrides["label_pattern"] = args.pattern

    cal = dategrid.get_calendar(args.preset, seed=_parse_ym(args.month), **overrides)
    cal.set_constraints(args.disable, args.min_date, args.max_date)
    for s in args.select:
        cal.select(_parse_ymd(s))

    print_calendar(cal)
    if cal.value not in (None, ()):
        print(f"selection: {cal.value}")
    if args.labels:
        for c in cal.cells():
            if c.in_current_month:
                print(f"{c.key:>7}  {c.label}")
    return 0


def cmd_label(argv: list[str]) -> int:
    import dategrid

    p = argparse.ArgumentParser(prog="dategrid label", description="Accessibility label for a date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--pattern", default=None, help="date-fns style pattern, e.g. \"EEE d MMM\"")
    args = p.parse_args(argv)

    print(dategrid.label(_parse_ymd(args.date), args.pattern))
    return 0


def cmd_presets(argv: list[str]) -> int:
    import dategrid

    p = argparse.ArgumentParser(prog="dategrid presets", description="List calendar presets")
    p.parse_args(argv)

    for name in dategrid.list_presets():
        info = dategrid.preset_info(name)
        print(f"{name:<10} {info['mode']:<9} week_start={info['week_start']}  {info.get('description', '')}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `dategrid [-v] YYYY-MM ...`
    verbose, i = _leading_verbosity(argv)
    if i < len(argv) and _MONTH_RE.match(argv[i]):
        _setup_logging(verbose)
        return cmd_month(argv[i:])

    p = argparse.ArgumentParser(prog="dategrid", description="Calendar date-grid engine CLI.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    sub = p.add_subparsers(dest="cmd", required=True)

    # month
    p_month = sub.add_parser("month", help="Print a month grid")
    p_month.add_argument("month", help="YYYY-MM")

    sub.add_parser("label", help="Accessibility label for a date")
    sub.add_parser("presets", help="List calendar presets")

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["pretty-month", "grid-shapes", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "month":
        return cmd_month([args.month] + rest)

    if args.cmd == "label":
        return cmd_label(rest)

    if args.cmd == "presets":
        return cmd_presets(rest)

    if args.cmd == "diag":
        tool_map = {
            "pretty-month": "dategrid.diagnostics.pretty_month",
            "grid-shapes": "dategrid.diagnostics.grid_shapes",
            "round-trip": "dategrid.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
