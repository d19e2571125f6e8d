#!/usr/bin/env python3
"""
Benchmark parallel palindrome scanning vs single-worker scanning.

Runs each synthetic sequence with one worker and with N workers, reports
throughput and speedup, and checks the two hit lists are identical.
"""

import random
import sys
import time
from typing import Dict, Any, List

# Add parent directory to path
sys.path.insert(0, '.')

from Scanner.scanner import PalindromeScanner, ScanConfig
from Utilities.system_resource_inspector import SystemResourceInspector

WINDOW_LENGTH = 10


def format_time(seconds: float) -> str:
    """Format seconds as human-readable string."""
    if seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def format_throughput(bp: int, seconds: float) -> str:
    """Format throughput as bp/s."""
    if seconds == 0:
        return "N/A"
    throughput = bp / seconds
    if throughput > 1_000_000:
        return f"{throughput/1_000_000:.2f} Mbp/s"
    elif throughput > 1_000:
        return f"{throughput/1_000:.2f} Kbp/s"
    else:
        return f"{throughput:.0f} bp/s"


def random_sequence(length: int, seed: int = 7) -> str:
    rng = random.Random(seed)
    return ''.join(rng.choice('ACGT') for _ in range(length))


def benchmark_sequence(sequence: str, name: str, workers: int) -> Dict[str, Any]:
    """Benchmark one scan with a fixed worker count."""
    scanner = PalindromeScanner(ScanConfig(window_length=WINDOW_LENGTH, workers=workers))
    start = time.perf_counter()
    hits = scanner.scan(sequence)
    elapsed = time.perf_counter() - start

    return {
        'name': name,
        'length': len(sequence),
        'hits': hits,
        'elapsed': elapsed,
        'workers': workers,
    }


def main():
    parallel_workers = max(2, min(8, SystemResourceInspector().get_cpu_count()))

    print("=" * 80)
    print("PARALLEL PALINDROME SCAN BENCHMARK")
    print("=" * 80)
    print()
    print(f"Window length: {WINDOW_LENGTH} | Parallel workers: {parallel_workers}")
    print()

    test_cases = [
        ("Small (100KB)", random_sequence(100_000)),
        ("Medium (1MB)", random_sequence(1_000_000)),
        ("Large (5MB)", random_sequence(5_000_000)),
    ]

    results: List[Dict[str, Any]] = []

    for test_name, sequence in test_cases:
        print(f"Testing {test_name} ({len(sequence):,} bp)")
        print("-" * 80)

        print("  1 worker...  ", end=" ", flush=True)
        single = benchmark_sequence(sequence, test_name, workers=1)
        results.append(single)
        print(f"{format_time(single['elapsed'])} - {len(single['hits'])} hits - "
              f"{format_throughput(single['length'], single['elapsed'])}")

        print(f"  {parallel_workers} workers...", end=" ", flush=True)
        multi = benchmark_sequence(sequence, test_name, workers=parallel_workers)
        results.append(multi)
        print(f"{format_time(multi['elapsed'])} - {len(multi['hits'])} hits - "
              f"{format_throughput(multi['length'], multi['elapsed'])}")

        speedup = single['elapsed'] / multi['elapsed'] if multi['elapsed'] > 0 else 0
        identical = single['hits'] == multi['hits']
        print(f"  Speedup: {speedup:.2f}x | Identical output: {identical}")
        print()

        if not identical:
            print("ERROR: parallel output differs from single-worker output")
            return 1

    print("=" * 80)
    print("SUMMARY")
    print("=" * 80)
    print()
    print(f"{'Test Case':<20} {'Workers':<8} {'Time':<12} {'Throughput':<15} {'Hits':<8}")
    print("-" * 80)

    for result in results:
        print(f"{result['name']:<20} {result['workers']:<8} {format_time(result['elapsed']):<12} "
              f"{format_throughput(result['length'], result['elapsed']):<15} {len(result['hits']):<8}")

    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
