#!/usr/bin/env python3
from __future__ import annotations

from typing import Dict, List, Optional

import argparse

import dategrid
from dategrid.engines.grid import WEEKDAY_ABBR


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "dategrid[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "dategrid[diagnostics]"') from e


def week_counts(np, start_year: int, end_year: int, week_start: int) -> "np.ndarray":
    """Number of week rows for every month in [start_year, end_year], month-major."""
    rows = []
    for y in range(start_year, end_year + 1):
        for m in range(1, 13):
            rows.append(len(dategrid.month_days(y, m, week_start=week_start)) // 7)
    return np.asarray(rows, dtype=int)


def tally(np, counts) -> Dict[int, int]:
    """Histogram over the only possible row counts, 4..6."""
    hist = np.bincount(counts, minlength=7)
    return {k: int(hist[k]) for k in (4, 5, 6)}


def tally_all(np, start_year: int, end_year: int) -> Dict[int, Dict[int, int]]:
    return {ws: tally(np, week_counts(np, start_year, end_year, ws)) for ws in range(7)}


def print_table(table: Dict[int, Dict[int, int]], start_year: int, end_year: int) -> None:
    print(f"Week rows per month grid, {start_year}..{end_year}")
    print(f"{'start':>6} {'4 wk':>7} {'5 wk':>7} {'6 wk':>7}")
    for ws, t in table.items():
        print(f"{WEEKDAY_ABBR[ws]:>6} {t[4]:7d} {t[5]:7d} {t[6]:7d}")


def plot_table(plt, table: Dict[int, Dict[int, int]], outbase: str) -> str:
    fig, ax = plt.subplots(figsize=(7.5, 4.0), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, axis="y", color="0.88", linewidth=0.7)

    labels: List[str] = [WEEKDAY_ABBR[ws] for ws in table]
    width = 0.26
    for i, (k, color) in enumerate(((4, "tab:green"), (5, "tab:blue"), (6, "tab:red"))):
        xs = [j + (i - 1) * width for j in range(len(labels))]
        ax.bar(xs, [table[ws][k] for ws in table], width=width, color=color, label=f"{k} weeks")

    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels)
    ax.set_xlabel("Week start")
    ax.set_ylabel("Months")
    ax.set_title("Month grid heights by week start")
    ax.legend(frameon=False)

    fig.savefig(outbase + ".png", dpi=200)
    return outbase + ".png"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Tally 4/5/6-week month grids for each week start.")
    p.add_argument("--start-year", type=int, default=2000)
    p.add_argument("--end-year", type=int, default=2399, help="inclusive (default spans one 400-year cycle)")
    p.add_argument("--plot", action="store_true", help="also write a bar chart (needs matplotlib)")
    p.add_argument("--outbase", default="grid_shapes", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    table = tally_all(np, args.start_year, args.end_year)
    print_table(table, args.start_year, args.end_year)

    if args.plot:
        plt = _need_matplotlib()
        path = plot_table(plt, table, args.outbase)
        print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
