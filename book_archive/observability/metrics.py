"""Prometheus-style counters for archive operations. Thread-safe, in-memory. No real Prometheus dependency."""

import threading
from typing import Any


class MetricsCollector:
    """
    In-memory counter registry. Counters may carry a single outcome label.
    Thread-safe. Exposes increment, get, export_metrics.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: dict[str, float] = {}
        self._counters_by_labels: dict[str, dict[str, float]] = {}

    def increment(
        self,
        name: str,
        value: float = 1.0,
        *,
        outcome: str | None = None,
    ) -> None:
        """Increment a counter, optionally under an outcome label."""
        with self._lock:
            if outcome is not None:
                key = f"{name}:outcome={outcome}"
                series = self._counters_by_labels.setdefault(name, {})
                series[key] = series.get(key, 0) + value
            else:
                self._counters[name] = self._counters.get(name, 0) + value

    def get(self, name: str, *, outcome: str | None = None) -> float:
        with self._lock:
            if outcome is not None:
                return self._counters_by_labels.get(name, {}).get(f"{name}:outcome={outcome}", 0)
            return self._counters.get(name, 0)

    def export_metrics(self) -> dict[str, Any]:
        """Export all counters as a dict (simulated Prometheus-style)."""
        with self._lock:
            return {
                "counters": dict(self._counters),
                "counters_by_labels": {
                    k: dict(v) for k, v in self._counters_by_labels.items()
                },
            }

    def reset(self) -> None:
        """Reset all metrics (for tests)."""
        with self._lock:
            self._counters.clear()
            self._counters_by_labels.clear()
