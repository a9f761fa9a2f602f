"""
Timing for tree operations and event dispatch.

Every event is handled synchronously, so a slow operation stalls the
host's event loop. Profiling is off until switched on (``--profile``,
the benchmark suite); each operation then keeps a call count and only
its most recent ``HISTORY`` durations.
"""

import time
import functools
import logging
from collections import defaultdict, deque
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Any, Deque, Dict, Optional
import json

logger = logging.getLogger("snaptile.profiling")

# Durations kept per operation
HISTORY = 1000


class PerformanceProfiler:
    """
    Process-wide profiler.

    Disabled by default. While enabled, records per operation the number
    of calls, the number of failed calls and a bounded window of recent
    durations in milliseconds.
    """

    # Performance targets (in milliseconds), one frame at 60Hz for dispatch
    TARGETS = {
        "dispatch": 16,
        "tree_split": 5,
        "tree_merge": 5,
        "tree_locate": 2,
    }

    _instance: Optional['PerformanceProfiler'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.enabled = False
        self.samples: Dict[str, Deque[float]] = defaultdict(lambda: deque(maxlen=HISTORY))
        self.counts: Dict[str, int] = defaultdict(int)
        self.failures: Dict[str, int] = defaultdict(int)

    @classmethod
    def get_instance(cls) -> 'PerformanceProfiler':
        """Get the singleton profiler instance."""
        return cls()

    def record(self, operation: str, duration_ms: float, success: bool = True):
        """Add one measurement, warning when it misses the operation's target."""
        self.samples[operation].append(duration_ms)
        self.counts[operation] += 1
        if not success:
            self.failures[operation] += 1

        target = self.TARGETS.get(operation)
        if target and duration_ms > target:
            logger.warning(
                f"Performance warning: {operation} took {duration_ms:.1f}ms "
                f"(target: {target}ms)"
            )

    @contextmanager
    def measure(self, operation: str):
        """Time the enclosed block; a no-op while disabled."""
        if not self.enabled:
            yield
            return
        start = time.perf_counter()
        success = True
        try:
            yield
        except Exception:
            success = False
            raise
        finally:
            self.record(operation, (time.perf_counter() - start) * 1000, success)

    def get_summary(self) -> Dict[str, Any]:
        """Per-operation statistics over the retained durations."""
        if not self.counts:
            return {"message": "No timing data collected"}

        summary = {}
        for op in sorted(self.counts):
            times = self.samples[op]
            target = self.TARGETS.get(op)
            avg = sum(times) / len(times)
            summary[op] = {
                "count": self.counts[op],
                "failures": self.failures.get(op, 0),
                "avg_ms": round(avg, 4),
                "max_ms": round(max(times), 4),
                "target_ms": target,
                "meets_target": avg <= target if target else None,
            }
        return summary

    def print_summary(self):
        summary = self.get_summary()
        if "message" in summary:
            print(summary["message"])
            return

        print("\n" + "=" * 60)
        print("PERFORMANCE SUMMARY")
        print("=" * 60)
        for op, stats in summary.items():
            status = ""
            if stats["target_ms"]:
                status = " [OK]" if stats["meets_target"] else " [SLOW]"
            print(f"{op:<24}{status:<8} n={stats['count']:<8} "
                  f"avg {stats['avg_ms']:.3f}ms  max {stats['max_ms']:.3f}ms")
        print("=" * 60)

    def save_report(self, path: Path):
        """Write the summary and retained durations as JSON."""
        data = {
            "summary": self.get_summary(),
            "samples": {op: list(times) for op, times in self.samples.items()},
        }
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

    def clear(self):
        self.samples.clear()
        self.counts.clear()
        self.failures.clear()


def timed(operation: str = None):
    """
    Decorator to time a function execution.

    Usage:
        @timed("tree_split")
        def split(self, leaf_id, edge, occupant_id):
            ...
    """
    def decorator(func: Callable) -> Callable:
        op_name = operation or func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with PerformanceProfiler.get_instance().measure(op_name):
                return func(*args, **kwargs)

        return wrapper
    return decorator


def profile_block(operation: str):
    """
    Context manager for profiling a block of code.

    Usage:
        with profile_block("replay"):
            engine.dispatch_all(events)
    """
    return PerformanceProfiler.get_instance().measure(operation)


profiler = PerformanceProfiler.get_instance()
