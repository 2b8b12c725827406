"""Generate bounded random integers and report their average.

Usage:
    python calc_average.py <minimum> <maximum> <count>

Prints ``count`` integers drawn uniformly from ``[minimum, maximum]``, one per
line, followed by their arithmetic mean.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Iterable, List, Optional, Sequence

from arguments import ArgumentError, parse_arguments
from bounded_random import BoundedRandomSource, fill_samples

logger = logging.getLogger(__name__)

GENERIC_ERROR_LINE = "There was an error. Exiting."
AVERAGE_PREFIX = "The average value of the vector is"


def error_message(message: str) -> None:
    print(message)
    print(GENERIC_ERROR_LINE)


def print_samples(samples: Iterable[int]) -> None:
    for value in samples:
        print(value)


def calculate_average(samples: Sequence[int]) -> float:
    """Arithmetic mean of ``samples``; an empty sequence yields NaN."""
    if not samples:
        return math.nan
    return sum(samples) / len(samples)


def format_average(value: float) -> str:
    return format(value, "g")


def _parse_args(argv: Optional[Sequence[str]]) -> List[str]:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0], add_help=False)
    parser.add_argument(
        "tokens",
        nargs="*",
        default=[],
        metavar="TOKEN",
        help="Smallest and largest number to generate, then how many",
    )
    if argv is None:
        argv = sys.argv[1:]
    # Everything after "--" is positional, so "-x" or "-h" reach parse_arguments in place.
    args = parser.parse_args(["--", *argv])
    return list(args.tokens)


def main(argv: Optional[Sequence[str]] = None) -> int:
    tokens = _parse_args(argv)
    try:
        request = parse_arguments(tokens)
    except ArgumentError as exc:
        logger.debug("rejected arguments %r: %s", tokens, exc)
        error_message(exc.message)
        return 1

    source = BoundedRandomSource(request.minimum, request.maximum)
    samples = fill_samples(request.count, source)
    print_samples(samples)
    average = calculate_average(samples)
    print(f"{AVERAGE_PREFIX} {format_average(average)}")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
