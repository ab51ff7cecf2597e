"""Command-line entry point — prints the latest prime number."""

from __future__ import annotations

import argparse
import logging
import sys

from .api import compute, format_result
from .counter import CandidateOverflowError
from . import constants


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nth-prime",
        description="Find the N-th prime number by trial division",
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=constants.DEFAULT_TARGET_COUNT,
        help=f"Position of the prime to find (default: {constants.DEFAULT_TARGET_COUNT})",
    )
    parser.add_argument(
        "--word-bits",
        type=int,
        default=None,
        choices=constants.SUPPORTED_WORD_BITS,
        help="Confine candidates to an unsigned integer of this width (default: unbounded)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable logging and print scan statistics to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error(f"--count must be a positive integer, got {args.count}")

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    try:
        prime, stats = compute(args.count, word_bits=args.word_bits)
    except CandidateOverflowError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return constants.EXIT_OVERFLOW

    print(format_result(prime))
    if args.verbose:
        print(stats.report(), file=sys.stderr)
    return constants.EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
