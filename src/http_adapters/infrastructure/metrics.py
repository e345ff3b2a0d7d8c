"""Prometheus metrics for HTTP adapters."""

from prometheus_client import Counter, Histogram, CollectorRegistry, REGISTRY


class AdapterMetrics:
    """Metrics collector for body readers and response helpers."""

    def __init__(self, registry: CollectorRegistry = REGISTRY):
        # Body Reader Metrics
        self.body_reads = Counter(
            "http_adapters_body_reads_total",
            "Total request bodies read",
            ["reader", "outcome"],
            registry=registry,
        )
        self.body_rejections = Counter(
            "http_adapters_body_rejections_total",
            "Total request bodies rejected or degraded to absent",
            ["reader", "reason"],
            registry=registry,
        )
        self.body_size = Histogram(
            "http_adapters_body_size_bytes",
            "Size of request bodies read",
            ["reader"],
            buckets=[0, 64, 512, 4096, 32768, 262144, 1048576],
            registry=registry,
        )

        # Response Metrics
        self.status_errors = Counter(
            "http_adapters_status_errors_total",
            "Total status exceptions converted into responses",
            ["status_code"],
            registry=registry,
        )
        self.json_responses = Counter(
            "http_adapters_json_responses_total",
            "Total JSON responses serialized",
            registry=registry,
        )


_metrics: AdapterMetrics | None = None


def get_metrics() -> AdapterMetrics:
    """Get the singleton metrics instance."""
    global _metrics
    if _metrics is None:
        _metrics = AdapterMetrics()
    return _metrics
