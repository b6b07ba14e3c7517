# busroute/monitoring/monitoring.py

from contextlib import contextmanager
import time

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


class OptimizerMetrics:
    """Prometheus metrics for route optimization calls.

    Each instance owns its registry so that several applications (and test
    clients) can live in one process without colliding on metric names.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: CollectorRegistry = None):
        self.registry = registry or CollectorRegistry()
        self._setup_metrics()

    def _setup_metrics(self):
        """Initialize Prometheus metrics."""
        self.optimizations = Counter(
            "busroute_optimizations_total",
            "Route optimizations completed, by strategy",
            ["strategy"],
            registry=self.registry,
        )
        self.fallbacks = Counter(
            "busroute_fallbacks_total",
            "Heuristic fallbacks, by reason",
            ["reason"],
            registry=self.registry,
        )
        self.failures = Counter(
            "busroute_optimization_failures_total",
            "Optimizations that ended in an error response",
            registry=self.registry,
        )
        self.duration = Histogram(
            "busroute_optimization_duration_seconds",
            "Time spent producing a route plan",
            buckets=[0.01, 0.1, 0.5, 1, 2, 5, 10, 30],
            registry=self.registry,
        )

    def record_success(self, strategy: str):
        self.optimizations.labels(strategy=strategy).inc()

    def record_fallback(self, reason: str):
        self.fallbacks.labels(reason=reason).inc()

    def record_failure(self):
        self.failures.inc()

    @contextmanager
    def track_duration(self):
        start = time.perf_counter()
        try:
            yield
        finally:
            self.duration.observe(time.perf_counter() - start)

    def render(self) -> bytes:
        return generate_latest(self.registry)
