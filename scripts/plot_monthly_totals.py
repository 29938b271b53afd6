#!/usr/bin/env python3
"""
Generate a PNG chart of monthly FARS accident counts, one line per year.
Outputs to output.png in the current directory unless --output is given.
"""
import argparse

from fars import summarize_years
from fars.plotting import plot_summary
from fars.utils.logging import setup_logging


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot monthly accident counts")
    ap.add_argument("years", nargs="+", type=int)
    ap.add_argument("--data-dir", default=None)
    ap.add_argument("--output", default="output.png")
    args = ap.parse_args(argv)

    setup_logging("fars.plot")
    summary = summarize_years(args.years, data_dir=args.data_dir)
    if summary.empty:
        raise SystemExit("No accident files could be loaded for the requested years")

    path = plot_summary(summary, args.output)
    print(f"✅  Saved {path}")


if __name__ == "__main__":
    main()
