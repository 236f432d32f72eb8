#!/usr/bin/env python3
"""Benchmark script for deepeq comparison speed.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of deepeq package."""
    start = time.perf_counter()
    import deepeq  # noqa: F401

    return time.perf_counter() - start


def benchmark_equal_records(count: int) -> float:
    """Measure equal() on two identical lists of nested dicts."""
    from deepeq import equal

    left = [{"id": i, "tags": [str(i), "x"], "meta": {"n": i}} for i in range(count)]
    right = [{"id": i, "tags": [str(i), "x"], "meta": {"n": i}} for i in range(count)]

    start = time.perf_counter()
    equal(left, right)
    return time.perf_counter() - start


def benchmark_truncated_diff(count: int) -> float:
    """Measure diff() when every leaf differs and most output is dropped."""
    from deepeq import diff

    left = list(range(count))
    right = [i + 1 for i in left]

    start = time.perf_counter()
    diff(left, right)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run deepeq benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=10000,
        help="Number of elements per compared collection",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": f"equal() nested records ({args.size})",
            "unit": "seconds",
            "value": benchmark_equal_records(args.size),
        },
        {
            "name": f"diff() truncated ({args.size} differences)",
            "unit": "seconds",
            "value": benchmark_truncated_diff(args.size),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
