#!/usr/bin/env python3
"""Write an HTML map of FARS accidents for one state and year."""

import argparse

from fars import render_state_map
from fars.utils.logging import setup_logging


def main(argv=None):
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("state", type=int, help="FARS STATE code, e.g. 1 for Alabama")
    ap.add_argument("year", type=int)
    ap.add_argument("--data-dir", default=None,
                    help="Directory with accident_<year>.csv.bz2 files (default: $FARS_DATA_DIR or cwd)")
    ap.add_argument("--output", default=None,
                    help="HTML path (default: $FARS_MAPS_DIR/accidents_<state>_<year>.html)")
    args = ap.parse_args(argv)

    setup_logging("fars.map_state")
    render_state_map(args.state, args.year, data_dir=args.data_dir, output=args.output)


if __name__ == "__main__":
    main()
