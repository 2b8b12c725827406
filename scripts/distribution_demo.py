"""Draw many samples and print how evenly they cover the range.

Prints the count observed for each value followed by the chi-squared
goodness-of-fit result against a uniform distribution.

Usage:
    python scripts/distribution_demo.py --minimum 1 --maximum 10 --draws 10000 --seed 42
"""
from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path

from scipy.stats import chisquare

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from bounded_random import BoundedRandomSource, fill_samples  # noqa: E402


def value_counts(samples: list[int], minimum: int, maximum: int) -> list[int]:
    counts = Counter(samples)
    return [counts.get(value, 0) for value in range(minimum, maximum + 1)]


def build_report(minimum: int, maximum: int, draws: int, seed: int | None = None) -> list[str]:
    source = BoundedRandomSource(minimum, maximum, seed=seed)
    counts = value_counts(fill_samples(draws, source), minimum, maximum)
    lines = [f"{value}: {count}" for value, count in zip(range(minimum, maximum + 1), counts)]
    result = chisquare(counts)
    lines.append(
        f"chi-squared: {result.statistic:.3f} p={result.pvalue:.4f} "
        f"(df={maximum - minimum}, seed={source.seed})"
    )
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description="Check the spread of the bounded random source")
    parser.add_argument("--minimum", type=int, default=1, help="Inclusive lower bound (default: 1)")
    parser.add_argument("--maximum", type=int, default=10, help="Inclusive upper bound (default: 10)")
    parser.add_argument("--draws", type=int, default=10000, help="Number of samples (default: 10000)")
    parser.add_argument("--seed", type=int, default=None, help="Seed; drawn from system entropy if omitted")
    args = parser.parse_args()

    for line in build_report(args.minimum, args.maximum, args.draws, args.seed):
        print(line)


if __name__ == "__main__":
    main()
