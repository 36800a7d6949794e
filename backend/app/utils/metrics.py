"""Prometheus metrics for generation and export operations."""

from prometheus_client import Counter, Histogram

operation_latency_ms = Histogram(
    "operation_latency_ms",
    "API operation latency in milliseconds",
    ["operation", "outcome"],
    buckets=[10, 50, 100, 200, 500, 1000, 2000, 4000, 8000, 16000],
)

operation_errors_total = Counter(
    "operation_errors_total",
    "Total API operation errors",
    ["operation", "reason"],
)


class PrometheusOperationMetrics:
    """Prometheus-based operation metrics implementation."""

    def record_latency(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record operation latency."""
        operation_latency_ms.labels(operation=operation, outcome=outcome).observe(latency_ms)

    def inc_error(self, operation: str, reason: str) -> None:
        """Increment error counter."""
        operation_errors_total.labels(operation=operation, reason=reason).inc()
