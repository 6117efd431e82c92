#!/usr/bin/env python3
"""
Benchmark quadtree circle queries against a linear scan.

Usage:
    python scripts/benchmark_quadtree.py [--sizes N,...] [--queries Q] [--radius R]

Examples:
    python scripts/benchmark_quadtree.py
    python scripts/benchmark_quadtree.py --sizes 1000,10000 --queries 500
    python scripts/benchmark_quadtree.py --order sorted --sizes 500
"""

from __future__ import annotations

import argparse
import json
import random
import time
from typing import Any

from point_quadtree import Point, PointQuadtree, points_in_circle

EXTENT = 1000.0


def make_points(n: int, order: str, rng: random.Random) -> list[Point]:
    """Generate n points in [0, EXTENT]^2, random or sorted along the diagonal."""
    if order == "sorted":
        step = EXTENT / max(n, 1)
        return [Point(i * step, i * step) for i in range(n)]
    return [Point(rng.uniform(0, EXTENT), rng.uniform(0, EXTENT)) for _ in range(n)]


def benchmark_size(
    n: int,
    queries: int,
    radius: float,
    order: str,
    seed: int = 42,
) -> dict[str, Any]:
    """
    Time building the tree and running queries with both methods.

    Returns:
        Dict with timings and result counts
    """
    rng = random.Random(seed)
    points = make_points(n, order, rng)
    centers = [(rng.uniform(0, EXTENT), rng.uniform(0, EXTENT)) for _ in range(queries)]

    start = time.perf_counter()
    tree = PointQuadtree.from_points(points, bounds=(0, 0, EXTENT, EXTENT))
    build_time = time.perf_counter() - start

    start = time.perf_counter()
    tree_hits = sum(len(tree.find_in_circle(cx, cy, radius)) for cx, cy in centers)
    tree_time = time.perf_counter() - start

    start = time.perf_counter()
    scan_hits = sum(len(points_in_circle(points, cx, cy, radius)) for cx, cy in centers)
    scan_time = time.perf_counter() - start

    return {
        "num_points": n,
        "order": order,
        "depth": tree.depth(),
        "build_seconds": build_time,
        "tree_query_seconds": tree_time,
        "scan_query_seconds": scan_time,
        "tree_hits": tree_hits,
        "scan_hits": scan_hits,
    }


def run_benchmarks(
    sizes: list[int],
    queries: int = 200,
    radius: float = 25.0,
    order: str = "random",
) -> list[dict]:
    """Run benchmarks for each point count."""
    print(f"\nBenchmarking {queries} queries of radius {radius} ({order} insertion order)")
    print("=" * 80)
    print(
        f"{'Points':>10s}{'Depth':>8s}{'Build':>12s}{'Tree':>12s}{'Scan':>12s}{'Hits':>10s}"
    )
    print("-" * 80)

    results = []
    for n in sizes:
        result = benchmark_size(n, queries, radius, order)
        if result["tree_hits"] != result["scan_hits"]:
            print(f"Warning: hit counts differ for n={n}")
        print(
            f"{n:>10d}{result['depth']:>8d}"
            f"{result['build_seconds']:>12.4f}"
            f"{result['tree_query_seconds']:>12.4f}"
            f"{result['scan_query_seconds']:>12.4f}"
            f"{result['tree_hits']:>10d}"
        )
        results.append(result)

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark quadtree circle queries")
    parser.add_argument("--sizes", default="1000,5000,20000", help="Comma-separated point counts")
    parser.add_argument("--queries", type=int, default=200, help="Queries per size")
    parser.add_argument("--radius", type=float, default=25.0, help="Query radius")
    parser.add_argument(
        "--order",
        choices=["random", "sorted"],
        default="random",
        help="Insertion order (sorted builds a chain)",
    )
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    sizes = [int(s) for s in args.sizes.split(",")]
    results = run_benchmarks(sizes, queries=args.queries, radius=args.radius, order=args.order)

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
