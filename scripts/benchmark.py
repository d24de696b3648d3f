#!/usr/bin/env python3
"""
Benchmark Script for LRU-Cache

Measures the throughput of the LRUCache operations. Every operation is O(1),
so ops/sec should stay flat as --operations grows.

Usage:
    python scripts/benchmark.py                    # Run all benchmarks
    python scripts/benchmark.py --operations 10000 # Custom operation count
    python scripts/benchmark.py --profile          # Enable cProfile
"""

import argparse
import time
import random
import string
import statistics
from typing import List, Callable, Dict, Any
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lrucache.cache.lru import LRUCache
from lrucache.config.settings import settings


def random_string(length: int) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choices(string.ascii_letters + string.digits, k=length))


def measure_time(func: Callable, iterations: int = 1) -> Dict[str, float]:
    """Measure execution time statistics."""
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = (time.perf_counter() - start) * 1000  # Convert to ms
        times.append(elapsed)

    return {
        "min_ms": min(times),
        "max_ms": max(times),
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "total_ms": sum(times),
    }


class Benchmark:
    """Collection of benchmarks for LRUCache operations."""

    def __init__(self, operations: int = 10000, key_size: int = 16, value_size: int = 64):
        self.operations = operations
        self.key_size = key_size
        self.value_size = value_size

        # Pre-generate test data
        self.keys = [random_string(key_size) for _ in range(operations)]
        self.values = [random_string(value_size) for _ in range(operations)]

    def _finish(self, stats: Dict[str, Any], operation: str) -> Dict[str, Any]:
        stats["ops_per_second"] = self.operations / (stats["total_ms"] / 1000)
        stats["operation"] = operation
        stats["count"] = self.operations
        return stats

    def benchmark_put(self) -> Dict[str, Any]:
        """Benchmark put() of new keys without eviction."""
        cache = LRUCache(self.operations * 2)

        def run():
            for i in range(self.operations):
                cache.put(self.keys[i], self.values[i])

        return self._finish(measure_time(run), "PUT")

    def benchmark_update(self) -> Dict[str, Any]:
        """Benchmark put() on keys already present."""
        cache = LRUCache(self.operations)
        for i in range(self.operations):
            cache.put(self.keys[i], self.values[i])

        def run():
            for i in range(self.operations - 1, -1, -1):
                cache.put(self.keys[i], self.values[0])

        return self._finish(measure_time(run), "PUT (update)")

    def benchmark_get(self) -> Dict[str, Any]:
        """Benchmark get() hits."""
        cache = LRUCache(self.operations * 2)
        for i in range(self.operations):
            cache.put(self.keys[i], self.values[i])

        def run():
            for i in range(self.operations):
                cache.get(self.keys[i])

        return self._finish(measure_time(run), "GET (hit)")

    def benchmark_get_miss(self) -> Dict[str, Any]:
        """Benchmark get() misses."""
        cache = LRUCache(self.operations * 2)
        miss_keys = [random_string(self.key_size) for _ in range(self.operations)]

        def run():
            for key in miss_keys:
                cache.get(key)

        return self._finish(measure_time(run), "GET (miss)")

    def benchmark_erase(self) -> Dict[str, Any]:
        """Benchmark erase()."""
        cache = LRUCache(self.operations * 2)
        for i in range(self.operations):
            cache.put(self.keys[i], self.values[i])

        def run():
            for i in range(self.operations):
                cache.erase(self.keys[i])

        return self._finish(measure_time(run), "ERASE")

    def benchmark_contains(self) -> Dict[str, Any]:
        """Benchmark contains() with a 50% hit ratio."""
        cache = LRUCache(self.operations * 2)
        for i in range(self.operations // 2):
            cache.put(self.keys[i], self.values[i])

        def run():
            for i in range(self.operations):
                cache.contains(self.keys[i])

        return self._finish(measure_time(run), "CONTAINS")

    def benchmark_eviction(self) -> Dict[str, Any]:
        """Benchmark put() with LRU eviction active."""
        # Small cache to force eviction
        capacity = max(1, self.operations // 10)
        cache = LRUCache(capacity)

        def run():
            for i in range(self.operations):
                cache.put(self.keys[i], self.values[i])

        stats = self._finish(measure_time(run), "PUT (with eviction)")
        stats["cache_size"] = capacity
        stats["evictions"] = cache.get_stats()["evictions"]
        return stats

    def benchmark_mixed_workload(self) -> Dict[str, Any]:
        """Benchmark mixed PUT/GET workload (50/50)."""
        cache = LRUCache(max(1, self.operations // 4))
        half = max(1, self.operations // 2)

        for i in range(half):
            cache.put(self.keys[i], self.values[i])

        def run():
            for i in range(self.operations):
                if i % 2 == 0:
                    cache.put(self.keys[i], self.values[i])
                else:
                    cache.get(self.keys[i % half])

        return self._finish(measure_time(run), "Mixed (50% PUT, 50% GET)")

    def run_all(self) -> List[Dict[str, Any]]:
        """Run all benchmarks."""
        benchmarks = [
            ("PUT", self.benchmark_put),
            ("PUT (update)", self.benchmark_update),
            ("GET (hit)", self.benchmark_get),
            ("GET (miss)", self.benchmark_get_miss),
            ("ERASE", self.benchmark_erase),
            ("CONTAINS", self.benchmark_contains),
            ("PUT (eviction)", self.benchmark_eviction),
            ("Mixed workload", self.benchmark_mixed_workload),
        ]

        results = []
        for name, func in benchmarks:
            print(f"Running: {name}...", end=" ", flush=True)
            result = func()
            print(f"{result['ops_per_second']:,.0f} ops/sec")
            results.append(result)

        return results


def print_results(results: List[Dict[str, Any]]):
    """Print benchmark results in a table."""
    print()
    print("=" * 70)
    print("                        BENCHMARK RESULTS")
    print("=" * 70)
    print(f"{'Operation':<30} {'Ops/sec':>12} {'Mean (ms)':>12} {'Total (ms)':>12}")
    print("-" * 70)

    for r in results:
        print(f"{r['operation']:<30} {r['ops_per_second']:>12,.0f} "
              f"{r['mean_ms']:>12.3f} {r['total_ms']:>12.1f}")

    print("=" * 70)

    total_ops = sum(r['count'] for r in results)
    total_time = sum(r['total_ms'] for r in results)
    avg_ops = total_ops / (total_time / 1000)

    print()
    print(f"Total operations: {total_ops:,}")
    print(f"Total time: {total_time / 1000:.2f} seconds")
    print(f"Average throughput: {avg_ops:,.0f} ops/sec")


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark LRU-Cache operations",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--operations", "-n",
        type=int,
        default=settings.BENCHMARK_OPERATIONS,
        help="Number of operations per benchmark"
    )
    parser.add_argument(
        "--key-size",
        type=int,
        default=16,
        help="Size of keys"
    )
    parser.add_argument(
        "--value-size",
        type=int,
        default=64,
        help="Size of values"
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Enable cProfile profiling"
    )

    args = parser.parse_args()

    print("LRU-Cache Benchmark")
    print("===================")
    print(f"Operations per test: {args.operations:,}")
    print(f"Key size: {args.key_size}")
    print(f"Value size: {args.value_size}")
    print()

    benchmark = Benchmark(
        operations=args.operations,
        key_size=args.key_size,
        value_size=args.value_size,
    )

    if args.profile:
        import cProfile
        import pstats

        profiler = cProfile.Profile()
        profiler.enable()
        results = benchmark.run_all()
        profiler.disable()

        print_results(results)

        print()
        print("Profiling Results (top 20):")
        print("-" * 70)
        stats = pstats.Stats(profiler)
        stats.sort_stats('cumulative')
        stats.print_stats(20)
    else:
        results = benchmark.run_all()
        print_results(results)


if __name__ == "__main__":
    main()
