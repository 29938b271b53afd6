#!/usr/bin/env python3
"""Print monthly FARS accident counts for one or more years."""

import argparse

from fars import summarize_years
from fars.utils.logging import setup_logging


def main(argv=None):
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("years", nargs="+", type=int, help="Years to summarise, e.g. 2013 2014")
    ap.add_argument("--data-dir", default=None,
                    help="Directory with accident_<year>.csv.bz2 files (default: $FARS_DATA_DIR or cwd)")
    ap.add_argument("--output", default=None, help="Optional CSV path for the summary table")
    ap.add_argument("--log-file", default=None)
    args = ap.parse_args(argv)

    logger = setup_logging("fars.summarize", log_file=args.log_file)
    summary = summarize_years(args.years, data_dir=args.data_dir)
    if args.output:
        summary.to_csv(args.output, index=False)
        logger.info("Summary written to %s", args.output)
    print(summary.to_string(index=False))


if __name__ == "__main__":
    main()
