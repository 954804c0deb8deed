"""Prometheus metrics for gateway call volume, failures and latency"""

from prometheus_client import Counter, Histogram

requests_counter = Counter(
    "rozetkapay_requests_total",
    "Gateway calls issued by the SDK",
    ["service", "method", "outcome"],  # success | api_error | transport_error | parse_error
)

request_failures_counter = Counter(
    "rozetkapay_request_failures_total",
    "Failed gateway calls by failure kind",
    ["service", "kind"],
)

request_duration_histogram = Histogram(
    "rozetkapay_request_duration_seconds",
    "Gateway call latency",
    ["service"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)


def record_request(service: str, method: str, outcome: str, duration_seconds: float) -> None:
    """Record one gateway call"""
    requests_counter.labels(service=service, method=method, outcome=outcome).inc()
    request_duration_histogram.labels(service=service).observe(duration_seconds)
    if outcome != "success":
        request_failures_counter.labels(service=service, kind=outcome).inc()
