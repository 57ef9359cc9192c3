"""
Performance benchmarks for GS1 identifier validation.
"""

import time
import statistics
from typing import Tuple

from gs1_identifiers import GDTI, GTIN13, luhn_check


def benchmark(func, iterations: int = 10000) -> Tuple[float, float, float]:
    """
    Run a benchmark and return timing statistics.

    Returns:
        (mean_us, min_us, max_us)
    """
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = time.perf_counter() - start
        times.append(elapsed * 1_000_000)

    return (
        statistics.mean(times),
        min(times),
        max(times)
    )


def run_benchmarks():
    """Run all benchmarks and print results."""
    print("=" * 60)
    print("GS1 Identifier Benchmarks")
    print("=" * 60)
    print()

    test_cases = [
        ("Luhn check (13 digits)", lambda: luhn_check("4719512002889", 13)),
        ("Luhn check (18 digits)", lambda: luhn_check("806141411234567896", 18)),
        ("GTIN-13 valid", lambda: GTIN13.try_create("4006381333931")),
        ("GTIN-13 formatted", lambda: GTIN13.try_create("4006 3813-33931")),
        ("GTIN-13 bad checksum", lambda: GTIN13.try_create("4006381333932")),
        ("GDTI with spaces", lambda: GDTI.try_create("4719512002889 1234567890 123456")),
        ("GDTI with dot", lambda: GDTI.try_create("4719512002889.1234567890.123456")),
    ]

    print(f"{'Test Case':<30} {'Mean (us)':>12} {'Min (us)':>12} {'Max (us)':>12}")
    print("-" * 68)

    for name, func in test_cases:
        mean, min_t, max_t = benchmark(func)
        print(f"{name:<30} {mean:>12.2f} {min_t:>12.2f} {max_t:>12.2f}")

    print()


if __name__ == "__main__":
    run_benchmarks()
