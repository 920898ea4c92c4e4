"""
palettekit Metrics Collection
In-process counters and timings for clustering and extraction runs.
"""
from collections import defaultdict, Counter
from threading import Lock
from typing import Dict, List, Optional

import numpy as np


class MetricsCollector:
    """Simple in-process metrics collector."""

    def __init__(self):
        """Initialize metrics collector."""
        self._lock = Lock()
        self._counters: Dict[str, int] = Counter()
        self._timings: Dict[str, List[float]] = defaultdict(list)
        self._iterations: List[int] = []

    def increment(self, name: str, amount: int = 1):
        """Increment a named counter."""
        with self._lock:
            self._counters[name] += amount

    def record_timing(self, operation: str, duration_ms: float):
        """Record timing for an operation."""
        with self._lock:
            self._timings[f"{operation}_duration_ms"].append(duration_ms)

    def record_iterations(self, iterations: int):
        """Record the number of k-means passes of one run."""
        with self._lock:
            self._iterations.append(iterations)

    def get_counters(self) -> Dict[str, int]:
        """Get current counter values."""
        with self._lock:
            return dict(self._counters)

    def get_timing_stats(self) -> Dict[str, Dict[str, float]]:
        """Get timing statistics."""
        with self._lock:
            stats = {}
            for operation, timings in self._timings.items():
                if timings:
                    stats[operation] = {
                        "count": len(timings),
                        "mean": sum(timings) / len(timings),
                        "min": min(timings),
                        "max": max(timings),
                        "p50": self._percentile(timings, 50),
                        "p95": self._percentile(timings, 95)
                    }
            return stats

    def get_iteration_stats(self) -> Dict[str, float]:
        """Get k-means iteration statistics."""
        with self._lock:
            if not self._iterations:
                return {}

            return {
                "count": len(self._iterations),
                "mean": sum(self._iterations) / len(self._iterations),
                "min": min(self._iterations),
                "max": max(self._iterations),
                "p50": self._percentile(self._iterations, 50),
                "p95": self._percentile(self._iterations, 95)
            }

    def reset(self):
        """Reset all metrics (for testing)."""
        with self._lock:
            self._counters.clear()
            self._timings.clear()
            self._iterations.clear()

    @staticmethod
    def _percentile(data: List[float], percentile: int) -> float:
        """Linear-interpolated percentile, 0.0 when there is no data."""
        return float(np.percentile(data, percentile)) if data else 0.0


# Global metrics instance
_metrics: Optional[MetricsCollector] = None


def get_metrics() -> MetricsCollector:
    """Get or create global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def reset_metrics():
    """Reset global metrics (for testing)."""
    global _metrics
    if _metrics is not None:
        _metrics.reset()
