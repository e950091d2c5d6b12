"""
PaletteLab Metrics Collection
In-process metrics collection for monitoring and performance tracking.
"""
import time
from collections import defaultdict, Counter
from typing import Any, Dict, List, Optional
from threading import Lock


class MetricsCollector:
    """Simple in-process metrics collector."""

    def __init__(self):
        """Initialize metrics collector."""
        self._lock = Lock()
        self._counters: Dict[str, int] = Counter()
        self._timings: Dict[str, List[float]] = defaultdict(list)
        self._palette_sizes: List[int] = []
        self._start_time = time.time()

    def increment(self, name: str, amount: int = 1):
        """Increment a named counter."""
        with self._lock:
            self._counters[name] += amount

    def increment_conversion_count(self, source: str):
        """Increment conversion counter by source representation."""
        self.increment(f"conversions_total_{source}")

    def increment_extraction_count(self):
        """Increment total extraction counter."""
        self.increment("extractions_total")

    def increment_empty_extraction_count(self):
        """Increment counter of extractions that found no opaque pixels."""
        self.increment("extractions_empty_total")

    def increment_failure_count(self, error_type: str):
        """Increment failure counter by error type."""
        self.increment(f"failed_total_{error_type}")

    def record_timing(self, operation: str, duration_ms: float):
        """Record timing for an operation."""
        with self._lock:
            self._timings[f"{operation}_duration_ms"].append(duration_ms)

    def record_palette_size(self, size: int):
        """Record the number of colors returned by an extraction."""
        with self._lock:
            self._palette_sizes.append(size)

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

    def get_palette_size_stats(self) -> Dict[str, float]:
        """Get extracted palette size statistics."""
        with self._lock:
            if not self._palette_sizes:
                return {}

            return {
                "count": len(self._palette_sizes),
                "mean": sum(self._palette_sizes) / len(self._palette_sizes),
                "min": min(self._palette_sizes),
                "max": max(self._palette_sizes)
            }

    def get_uptime_seconds(self) -> float:
        """Get service uptime in seconds."""
        return time.time() - self._start_time

    def get_summary(self) -> Dict[str, Any]:
        """Get complete metrics summary."""
        return {
            "uptime_seconds": self.get_uptime_seconds(),
            "counters": self.get_counters(),
            "timing_stats": self.get_timing_stats(),
            "palette_size_stats": self.get_palette_size_stats()
        }

    def reset(self):
        """Reset all metrics (for testing)."""
        with self._lock:
            self._counters.clear()
            self._timings.clear()
            self._palette_sizes.clear()
            self._start_time = time.time()

    @staticmethod
    def _percentile(data: List[float], percentile: int) -> float:
        """Calculate percentile of data."""
        if not data:
            return 0.0

        sorted_data = sorted(data)
        k = (len(sorted_data) - 1) * percentile / 100
        f = int(k)
        c = k - f

        if f + 1 < len(sorted_data):
            return sorted_data[f] + c * (sorted_data[f + 1] - sorted_data[f])
        else:
            return sorted_data[f]


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
