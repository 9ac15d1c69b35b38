#!/usr/bin/env python3
"""
Shift Split CLI: divide a shift (possibly overnight) into equal sub-shifts at 5-minute steps,
or list the three alternatives when an exact split is impossible.
"""
import argparse
import logging
import sys
from pathlib import Path

# Run from project root or with module path
try:
    from shift_split import config
    from shift_split.name_import import load_names
    from shift_split.names import NamePool
    from shift_split.run import run
    from shift_split.store import NameStore
except ImportError:
    sys.path.insert(0, str(Path(__file__).resolve().parent))
    from shift_split import config
    from shift_split.name_import import load_names
    from shift_split.names import NamePool
    from shift_split.run import run
    from shift_split.store import NameStore


def main() -> int:
    config.load_env()
    try:
        cfg = config.settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = argparse.ArgumentParser(
        description="Shift Split: divide a shift into equal sub-shifts.",
    )
    parser.add_argument("start", help="Start time HH:MM")
    parser.add_argument("end", help="End time HH:MM (<= start means next day)")
    parser.add_argument(
        "-n", "--shifts",
        type=int,
        default=None,
        help="Number of sub-shifts (required unless --auto-count)",
    )
    parser.add_argument(
        "--granularity",
        type=int,
        default=cfg.granularity,
        help=f"Rounding step in minutes (default {cfg.granularity})",
    )
    parser.add_argument(
        "--direct",
        action="store_true",
        help="Minute-exact split ignoring the granularity",
    )
    parser.add_argument(
        "--first-extra",
        type=int,
        default=None,
        help="Remainder minutes for the first shift (the rest go to the last)",
    )
    parser.add_argument(
        "--names",
        type=Path,
        default=None,
        help="Names file (CSV, Excel, or TXT). Default: the name store",
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=cfg.store_path,
        help=f"Name store JSON (default {cfg.store_path})",
    )
    parser.add_argument(
        "--no-names",
        action="store_true",
        help="Do not label shifts with names",
    )
    parser.add_argument(
        "--auto-count",
        action="store_true",
        help="Derive the number of shifts from present names",
    )
    parser.add_argument(
        "--pairing",
        action="store_true",
        help="Two names per shift",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the name shuffle")
    parser.add_argument(
        "--locale",
        choices=["en", "he"],
        default=cfg.locale,
        help="Output language",
    )
    parser.add_argument(
        "--no-snap",
        action="store_true",
        help="Keep input times as given instead of rounding to the granularity",
    )
    parser.add_argument(
        "--export",
        type=Path,
        default=None,
        help="Write segments to .csv or .xlsx",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.names and not args.names.exists():
        print(f"Error: names file not found: {args.names}", file=sys.stderr)
        return 1

    try:
        pool = None
        if not args.no_names:
            if args.names:
                pool = NamePool.from_names(load_names(args.names))
            elif args.store.exists():
                pool = NameStore(args.store).load()
        result = run(
            start_time=args.start,
            end_time=args.end,
            shift_count=args.shifts,
            granularity=args.granularity,
            direct=args.direct,
            pool=pool,
            auto_count=args.auto_count,
            pairing=args.pairing,
            seed=args.seed,
            first_extra=args.first_extra,
            locale=args.locale,
            snap=not args.no_snap,
            export_path=args.export,
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.output_text)
    if result.export_path:
        print()
        print(f"Exported: {result.export_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
