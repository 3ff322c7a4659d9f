#!/usr/bin/env python3
"""
Compute the bounding box of the points in a JSON file.

Usage:
  python scripts/compute_bbox.py points.json [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from polybounds.errors import PointsFileError
from polybounds.io import load_linestring
from polybounds.results import BboxResult


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the axis aligned bounding box of a points file as JSON."
    )
    parser.add_argument(
        "points_file",
        type=str,
        help="JSON file with [[x, y], ...], [{'x':..,'y':..}, ...] or {'points': [...]}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        line = load_linestring(args.points_file)
    except PointsFileError as e:
        logging.getLogger("compute_bbox").error("%s", e)
        return 1

    print(BboxResult.from_linestring(line).to_json())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
