"""Command-line shell: read one JSON object, print it and its flattened form."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .flattening import flatten
from .io_utils import ParseError, dump_json, read_json_object

logger = logging.getLogger(__name__)

DIVIDER = "==================="
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-flattener",
        description="Flatten a JSON object into dot-path keys, collecting collisions into arrays.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input JSON file path or '-' for stdin.")
    parser.add_argument("--separator", default=".", help="Separator used in flattened keys.")
    parser.add_argument("--flat-only", action="store_true", help="Print only the flattened object.")
    parser.add_argument("--compact", action="store_true", help="Emit compact JSON output.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for diagnostics on stderr.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        data = read_json_object(args.input)
    except (ParseError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        result = flatten(data, args.separator)
    except RecursionError:
        print("error: document is nested too deeply to flatten", file=sys.stderr)
        return 1
    logger.info("Flattened %d top-level keys into %d keys", len(data), len(result))

    if not args.flat_only:
        print(dump_json(data, compact=args.compact))
        print(DIVIDER)
    print(dump_json(result, compact=args.compact))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
