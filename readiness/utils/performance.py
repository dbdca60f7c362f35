"""Performance monitoring utilities"""
import threading
import time
from collections import deque
from functools import wraps
from dataclasses import dataclass, field
from typing import Deque, Dict
import numpy as np

# Latency samples kept per operation
WINDOW_SIZE = 1000


@dataclass
class OperationMetrics:
    """Latency and outcome counters for one engine operation"""
    calls: int = 0
    failures: int = 0
    latencies: Deque[float] = field(default_factory=lambda: deque(maxlen=WINDOW_SIZE))
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def avg_latency(self) -> float:
        with self._lock:
            samples = list(self.latencies)
        return float(np.mean(samples)) if samples else 0.0

    @property
    def p95_latency(self) -> float:
        with self._lock:
            samples = list(self.latencies)
        return float(np.percentile(samples, 95)) if samples else 0.0

    def add_call(self, latency: float, success: bool = True):
        """Record a call"""
        with self._lock:
            self.calls += 1
            self.latencies.append(latency)
            if not success:
                self.failures += 1


class PerformanceMonitor:
    """Monitor engine operation latency"""

    def __init__(self):
        self.metrics: Dict[str, OperationMetrics] = {}
        self._lock = threading.Lock()

    def _metrics_for(self, name: str) -> OperationMetrics:
        with self._lock:
            return self.metrics.setdefault(name, OperationMetrics())

    def measure(self, func):
        """Decorator to measure execution time"""
        name = func.__name__

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            metrics = self._metrics_for(name)
            try:
                result = func(*args, **kwargs)
            except Exception:
                metrics.add_call(time.perf_counter() - start, False)
                raise
            metrics.add_call(time.perf_counter() - start, True)
            return result

        return wrapper

    def reset(self):
        with self._lock:
            self.metrics = {}

    def get_report(self) -> dict:
        """Generate performance report"""
        with self._lock:
            metrics = dict(self.metrics)
        return {
            name: {
                "calls": m.calls,
                "failures": m.failures,
                "avg_latency_ms": round(m.avg_latency * 1000, 4),
                "p95_latency_ms": round(m.p95_latency * 1000, 4),
            }
            for name, m in metrics.items()
        }

# Global monitor instance
monitor = PerformanceMonitor()
