#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Tuple

import argparse

import calconv
from calconv.core.time import from_rd


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calconv[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calconv[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def days_since_vernal_equinox(d: date) -> int:
    """Days since the nominal vernal equinox, with Mar 21 = 1."""
    return (d - date(d.year, 3, 21)).days + 1


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    linewidths: float = 0.0
    size: float = 16.0
    hollow: bool = False


def build_series(np, holiday: str, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    """One point per occurrence; years with no occurrence contribute nothing."""
    xs: List[int] = []
    ys: List[float] = []
    for Y in range(start_year, end_year + 1):
        for rd in calconv.holiday(holiday, Y):
            d = from_rd(rd)
            if metric == "doy":
                ys.append(float(day_of_year(d)))
            elif metric == "since-equinox":
                ys.append(float(days_since_vernal_equinox(d)))
            else:
                raise ValueError("metric must be 'doy' or 'since-equinox'")
            xs.append(Y)
    return np.array(xs, dtype=int), np.array(ys, dtype=float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of spring holiday dates across traditions.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="holiday_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-equinox", "doy"),
        default="since-equinox",
        help="Y-axis metric (default: days since Mar 21).",
    )
    args = p.parse_args(argv)

    if args.start_year < 1:
        raise SystemExit("--start-year must be >= 1")
    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "easter":   Style("Easter",       "tab:blue", "o", linewidths=0.0, size=12, hollow=False),
        "passover": Style("Passover",     "0.45",     "o", linewidths=1.2, size=18, hollow=True),
        "purim":    Style("Purim",        "tab:red",  "_", linewidths=1.0, size=18, hollow=False),
        "pentecost": Style("Pentecost",   "tab:green", "|", linewidths=1.0, size=18, hollow=False),
    }

    fig, ax = plt.subplots(figsize=(9.0, 4.5), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, color="0.9", linewidth=0.6)

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days since vernal equinox (Mar 21 = 1)")
    ax.set_title("Spring holidays across traditions")

    for name, st in styles.items():
        x, y = build_series(np, name, args.start_year, args.end_year, metric=args.metric)
        colors = {"facecolors": "none", "edgecolors": st.color} if st.hollow else {"c": st.color}
        ax.scatter(x, y, s=st.size, marker=st.marker, linewidths=st.linewidths,
                   alpha=0.6 if st.hollow else 0.35, label=st.label, **colors)

        if args.show_trend and len(y):
            ax.plot(x, rolling_median(np, y, win=int(args.trend_win)),
                    color="0.30" if st.hollow else st.color, linewidth=1.6)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
