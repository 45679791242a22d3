#!/usr/bin/env python3
"""
Distribution audit for the random source and the password generator.

Runs seeded draws and reports chi-square statistics for:
- full-domain ranged draws bucketed by their top 4 bits
- fill-step category frequencies
- shuffle permutation frequencies

Usage:
    python -m scripts.distribution_audit --rounds 100000 --seed 2025 --out out/audit.csv
"""
import argparse
import csv
import sys
from collections import Counter
from dataclasses import dataclass, field
from itertools import permutations
from pathlib import Path
from typing import Hashable, Iterable

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from passgen.config_hash import get_config_hash
from passgen.logic.generator import PasswordGenerator, fisher_yates_shuffle
from passgen.logic.models import PasswordOptions
from passgen.logic.rng import UINT32_MAX, RandomSource, SeededRandom


# Chi-square critical values at p = 0.001, keyed by degrees of freedom
CHI_SQUARE_CRITICAL_P001: dict[int, float] = {
    3: 16.266,
    15: 37.697,
    23: 49.728,
}

RANGE_BUCKET_BITS = 4
SHUFFLE_SIZE = 4
FILL_LENGTH = 32


@dataclass
class AuditStats:
    """Chi-square statistics accumulated during the audit."""
    rounds: int = 0
    range_chi_square: float = 0.0
    range_df: int = 0
    category_chi_square: float = 0.0
    category_df: int = 0
    permutation_chi_square: float = 0.0
    permutation_df: int = 0
    failures: list[str] = field(default_factory=list)


def chi_square(observed: Counter, categories: Iterable[Hashable], expected: float) -> float:
    """Pearson chi-square of observed counts against a uniform expectation."""
    return sum((observed.get(c, 0) - expected) ** 2 / expected for c in categories)


def range_bucket_counts(rng: RandomSource, rounds: int) -> Counter:
    """Bucket full-domain draws by their top RANGE_BUCKET_BITS bits."""
    shift = 32 - RANGE_BUCKET_BITS
    return Counter(rng.uniform_in_range(0, UINT32_MAX) >> shift for _ in range(rounds))


def permutation_counts(rng: RandomSource, size: int, rounds: int) -> Counter:
    """Count the permutations produced by shuffling range(size)."""
    counts: Counter = Counter()
    for _ in range(rounds):
        items = list(range(size))
        fisher_yates_shuffle(rng, items)
        counts[tuple(items)] += 1
    return counts


def classify(char: str) -> str:
    if char.islower():
        return "lower"
    if char.isupper():
        return "upper"
    if char.isdigit():
        return "numeric"
    return "special"


def category_counts(rng: RandomSource, rounds: int) -> Counter:
    """Count fill-step categories over passwords with no minimums."""
    generator = PasswordGenerator(PasswordOptions(output_length=FILL_LENGTH, random_source=rng))
    counts: Counter = Counter()
    for _ in range(rounds):
        counts.update(classify(c) for c in generator.generate())
    return counts


def _check(stats: AuditStats, name: str, value: float, df: int) -> None:
    critical = CHI_SQUARE_CRITICAL_P001[df]
    if value > critical:
        stats.failures.append(f"{name}: chi2={value:.2f} > {critical} (df={df})")


def run_audit(seed: int, rounds: int, verbose: bool = False) -> AuditStats:
    """Run all distribution checks with one seeded source."""
    rng = SeededRandom(seed)
    stats = AuditStats(rounds=rounds)

    buckets = 1 << RANGE_BUCKET_BITS
    observed = range_bucket_counts(rng, rounds)
    stats.range_chi_square = chi_square(observed, range(buckets), rounds / buckets)
    stats.range_df = buckets - 1
    _check(stats, "range", stats.range_chi_square, stats.range_df)
    if verbose:
        print(f"  range buckets: {dict(sorted(observed.items()))}")

    category_rounds = max(1, rounds // FILL_LENGTH)
    observed = category_counts(rng, category_rounds)
    names = ("lower", "upper", "numeric", "special")
    stats.category_chi_square = chi_square(observed, names, category_rounds * FILL_LENGTH / len(names))
    stats.category_df = len(names) - 1
    _check(stats, "category", stats.category_chi_square, stats.category_df)
    if verbose:
        print(f"  categories: {dict(observed)}")

    perms = list(permutations(range(SHUFFLE_SIZE)))
    observed = permutation_counts(rng, SHUFFLE_SIZE, rounds)
    stats.permutation_chi_square = chi_square(observed, perms, rounds / len(perms))
    stats.permutation_df = len(perms) - 1
    _check(stats, "permutation", stats.permutation_chi_square, stats.permutation_df)

    return stats


def generate_csv(seed: int, stats: AuditStats, output_path: str) -> None:
    """Write a one-row CSV audit summary."""
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    row = {
        "seed": seed,
        "rounds": stats.rounds,
        "fill_policy_hash": get_config_hash(PasswordOptions(output_length=FILL_LENGTH)),
        "range_chi_square": f"{stats.range_chi_square:.4f}",
        "range_df": stats.range_df,
        "category_chi_square": f"{stats.category_chi_square:.4f}",
        "category_df": stats.category_df,
        "permutation_chi_square": f"{stats.permutation_chi_square:.4f}",
        "permutation_df": stats.permutation_df,
        "passed": not stats.failures,
    }

    with open(output_file, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=row.keys())
        writer.writeheader()
        writer.writerow(row)

    print(f"CSV written to: {output_path}")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Distribution audit for passgen")
    parser.add_argument(
        "--rounds",
        type=int,
        default=100000,
        help="Number of draws per check",
    )
    parser.add_argument(
        "--seed",
        type=int,
        required=True,
        help="Seed for reproducibility",
    )
    parser.add_argument(
        "--out",
        type=str,
        default=None,
        help="Output CSV path",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show observed counts",
    )

    args = parser.parse_args()

    print(f"Running audit: rounds={args.rounds}, seed={args.seed}")
    stats = run_audit(seed=args.seed, rounds=args.rounds, verbose=args.verbose)

    if args.out:
        generate_csv(seed=args.seed, stats=stats, output_path=args.out)

    print("\nSummary:")
    print(f"  Range chi2: {stats.range_chi_square:.2f} (df={stats.range_df})")
    print(f"  Category chi2: {stats.category_chi_square:.2f} (df={stats.category_df})")
    print(f"  Permutation chi2: {stats.permutation_chi_square:.2f} (df={stats.permutation_df})")

    if stats.failures:
        for failure in stats.failures:
            print(f"ASSERTION FAILED: {failure}")
        return 1

    print("\nASSERTION PASSED: all statistics below p=0.001 critical values")
    return 0


if __name__ == "__main__":
    sys.exit(main())
