"""Command line interface for booker."""

from __future__ import annotations

import argparse
import sys

from booker.config import BOOKER_LOG_LEVEL, BOOKER_STRICT_IDS
from booker.exceptions import BookerError
from booker.logging_config import cli_logging
from booker.results import STDOUT_DESTINATION
from booker.runner import run_booking_session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="booker",
        description="Answer booking queries against a building/section/vehicle hierarchy.",
    )
    parser.add_argument("resources", help="Path to the resources JSON file")
    parser.add_argument("queries", help="Path to the queries text file")
    parser.add_argument(
        "results",
        help=f"Path to write results to ('{STDOUT_DESTINATION}' for stdout)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log loading and per-query details",
    )
    ids = parser.add_mutually_exclusive_group()
    ids.add_argument(
        "--allow-duplicate-ids",
        dest="strict",
        action="store_false",
        help="Keep the first definition of a reused resource id instead of failing",
    )
    ids.add_argument(
        "--strict-ids",
        dest="strict",
        action="store_true",
        help="Fail on a reused resource id (default unless BOOKER_STRICT_IDS=false)",
    )
    parser.set_defaults(strict=BOOKER_STRICT_IDS)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    with cli_logging("DEBUG" if args.verbose else BOOKER_LOG_LEVEL):
        try:
            run_booking_session(
                args.resources,
                args.queries,
                args.results,
                strict=args.strict,
            )
        except BookerError as exc:
            print(f"ERROR -> {exc}", file=sys.stderr)
            return 1

        if args.results != STDOUT_DESTINATION:
            print(f"SUCCESS -> Results written to output file: '{args.results}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
