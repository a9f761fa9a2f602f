#!/usr/bin/env python
"""
SnapTile Performance Benchmark Suite

Measures tree operations and event dispatch and generates a report.

Usage:
    python -m benchmarks.run_benchmarks
    python -m benchmarks.run_benchmarks --windows 200 --output report.json
"""

import argparse
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from snaptile.utils.profiling import profiler, profile_block


def benchmark_imports():
    """Benchmark module import times."""
    print("Benchmarking imports...")

    with profile_block("import_numpy"):
        import numpy as np

    with profile_block("import_snaptile_core"):
        from snaptile.core import PartitionTree, TilerEngine


def benchmark_partition_tree(depth: int = 12):
    """Benchmark split/locate/merge on a deep tree."""
    print(f"Benchmarking partition tree (depth {depth})...")

    from snaptile.core import PartitionTree
    from snaptile.models import Edge, Point, Size

    tree = PartitionTree.for_viewport(Size(4096, 4096))
    leaf_id = tree.root.region_id
    edges = [Edge.LEFT, Edge.TOP, Edge.RIGHT, Edge.BOTTOM]
    for i in range(depth):
        tree = tree.split(leaf_id, edges[i % 4], f"w{i}")
        leaf_id = tree.leaf_of(f"w{i}").region_id

    with profile_block("locate_deep"):
        for x in range(0, 4096, 64):
            tree.locate(Point(x, x))

    for i in reversed(range(depth)):
        tree = tree.merge(tree.leaf_of(f"w{i}").region_id)


def benchmark_drag_session(windows: int = 50, seed: int = 0):
    """Benchmark a random create/drag/close session through the engine."""
    print(f"Benchmarking drag session ({windows} windows)...")

    import numpy as np
    from snaptile.config import TilerSettings
    from snaptile.core import TilerEngine
    from snaptile.models import Point, Size

    rng = np.random.default_rng(seed)
    engine = TilerEngine(Size(1920, 1080), TilerSettings(placement_seed=seed))

    with profile_block("drag_session"):
        ids = [engine.create_window() for _ in range(windows)]
        for window_id in ids:
            window = engine.state.registry.get(window_id)
            start = window.position + Point(5, 5)
            engine.pointer_down(window_id, start)
            for _ in range(10):
                engine.pointer_move(Point(*rng.uniform(0, [1920, 1080])))
            engine.pointer_up(Point(*rng.uniform(0, [1920, 1080])))
        for window_id in ids[::2]:
            engine.close_window(window_id)


def main():
    parser = argparse.ArgumentParser(description="SnapTile Performance Benchmarks")
    parser.add_argument("--windows", type=int, default=50, help="Windows in the drag session")
    parser.add_argument("--output", type=str, help="Path to save benchmark report (JSON)")
    args = parser.parse_args()
    profiler.enabled = True

    print("=" * 60)
    print("SnapTile Performance Benchmark Suite")
    print("=" * 60)
    print()

    benchmark_imports()
    print()

    benchmark_partition_tree()
    print()

    benchmark_drag_session(args.windows)
    print()

    profiler.print_summary()

    if args.output:
        output_path = Path(args.output)
        profiler.save_report(output_path)
        print(f"\nReport saved to: {output_path}")


if __name__ == "__main__":
    main()
