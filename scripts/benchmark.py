#!/usr/bin/env python3
"""Benchmark script for mixkit performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of mixkit package."""
    start = time.perf_counter()
    import mixkit  # noqa: F401

    return time.perf_counter() - start


def benchmark_linearization(depth: int = 50) -> float:
    """Measure ancestors() of a deep chain with a diamond at every level."""
    from mixkit import Module

    top = Module("M0")
    for level in range(1, depth):
        left = Module(f"L{level}", top)
        right = Module(f"R{level}", top)
        top = Module(f"M{level}")
        top.include(left)
        top.include(right)

    start = time.perf_counter()
    for _ in range(1000):
        top.resolve()
        top.ancestors()
    return time.perf_counter() - start


def benchmark_super_dispatch(depth: int = 10) -> float:
    """Measure calls going through a chain of super calls."""
    from mixkit import Module, calls_super, define_class

    module = Module("Base", {"total": lambda self, n: n})
    for level in range(depth):

        @calls_super
        def total(self, n, *, super_):
            return super_() + 1

        module = Module(f"Level{level}", module)
        module.add_method("total", total)

    instance = define_class("Bench", module)()
    start = time.perf_counter()
    for _ in range(10000):
        instance.total(0)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run mixkit benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": "Linearization (1k resolves, 50 diamonds)",
            "unit": "seconds",
            "value": benchmark_linearization(),
        },
        {
            "name": "Super Dispatch (10k calls, depth 10)",
            "unit": "seconds",
            "value": benchmark_super_dispatch(),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
