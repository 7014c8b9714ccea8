"""Timing statistics for list refreshes.

Refreshing the package browser rebuilds every panel at once, so this module
keeps an eye on how long that takes and reports refreshes that are slow
enough to cause a visible hitch.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from functools import wraps
from typing import Any, Callable, Deque, Dict, List, Optional, TypeVar

from PySide6.QtCore import QObject, Signal

from ..config import SLOW_REFRESH_THRESHOLD_MS

F = TypeVar('F', bound=Callable[..., Any])

logger = logging.getLogger(__name__)


class PerformanceMonitor(QObject):
    """Record durations of decorated operations.

    Only the most recent samples of each operation are kept.  Operations that
    exceed the slow threshold are logged and announced through
    :attr:`slowOperationDetected` even when sample collection is disabled.
    """

    # operation_name, duration_ms
    slowOperationDetected = Signal(str, float)

    SAMPLE_WINDOW = 100

    def __init__(self, enabled: bool = False, slow_threshold_ms: float = SLOW_REFRESH_THRESHOLD_MS):
        super().__init__()
        self._enabled = enabled
        self._slow_threshold_ms = slow_threshold_ms
        self._samples: Dict[str, Deque[float]] = {}
        self._totals: Dict[str, int] = {}

    def enable(self, enabled: bool = True) -> None:
        self._enabled = enabled

    def is_enabled(self) -> bool:
        return self._enabled

    def measure(self, operation: str) -> Callable[[F], F]:
        """Decorator that times every call of the wrapped function.

        Example:
            @performance_monitor.measure("sync.refresh_lists")
            def refresh_lists(self):
                ...
        """
        def decorator(func: F) -> F:
            @wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                start = time.perf_counter()
                try:
                    return func(*args, **kwargs)
                finally:
                    elapsed_ms = (time.perf_counter() - start) * 1000
                    if self._enabled:
                        self._record(operation, elapsed_ms)
                    if elapsed_ms > self._slow_threshold_ms:
                        logger.warning("%s took %.1fms", operation, elapsed_ms)
                        self.slowOperationDetected.emit(operation, elapsed_ms)

            return wrapper  # type: ignore
        return decorator

    def _record(self, operation: str, elapsed_ms: float) -> None:
        samples = self._samples.get(operation)
        if samples is None:
            samples = self._samples[operation] = deque(maxlen=self.SAMPLE_WINDOW)
            self._totals[operation] = 0
        samples.append(elapsed_ms)
        self._totals[operation] += 1

    def get_stats(self, operation: str) -> Optional[Dict[str, float]]:
        """Return count, total_count, mean, min, max and p95 (ms) for *operation*."""
        samples = self._samples.get(operation)
        if not samples:
            return None

        timings = list(samples)
        return {
            "count": len(timings),
            "total_count": self._totals.get(operation, 0),
            "mean": sum(timings) / len(timings),
            "min": min(timings),
            "max": max(timings),
            "p95": self._percentile(timings, 95),
        }

    def log_report(self) -> None:
        """Write the collected statistics to the log at INFO level."""
        if not self._samples:
            logger.info("No refresh timings collected.")
            return

        for operation in sorted(self._samples):
            stats = self.get_stats(operation)
            if stats is None:
                continue
            logger.info(
                "%s: %d samples (total %d), mean %.2fms, p95 %.2fms, min/max %.2f/%.2fms",
                operation,
                stats["count"],
                stats["total_count"],
                stats["mean"],
                stats["p95"],
                stats["min"],
                stats["max"],
            )

    def reset(self) -> None:
        self._samples.clear()
        self._totals.clear()

    @staticmethod
    def _percentile(data: List[float], p: int) -> float:
        if not data:
            return 0.0
        sorted_data = sorted(data)
        index = min(int(len(sorted_data) * p / 100), len(sorted_data) - 1)
        return sorted_data[index]


# Enable sample collection while profiling with: performance_monitor.enable(True)
performance_monitor = PerformanceMonitor(enabled=False)
