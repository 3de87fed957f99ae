"""Prometheus metrics for the vbank credit service.

Metrics are organized into two categories:

Business Metrics:
- vbank_quote_total: Quote requests by outcome
- vbank_lending_rate_percent: Distribution of quoted lending rates
- vbank_usage_tracked_total: Group usage increments by outcome

Technical Metrics:
- vbank_quote_latency_seconds: Quote request latency
- vbank_config_backend_requests_total: Config backend attempts by outcome
- vbank_config_backend_retries_total: Config backend retries
- vbank_config_backend_latency_seconds: Config backend attempt latency
- vbank_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

quote_total = Counter(
    "vbank_quote_total",
    "Total number of credit quote requests",
    ["outcome"],  # quoted, invalid, not_found, invalid_state, backend_error
)

lending_rate = Histogram(
    "vbank_lending_rate_percent",
    "Quoted lending rates in percent",
    buckets=[1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0],
)

usage_tracked_total = Counter(
    "vbank_usage_tracked_total",
    "Group usage counter increments",
    ["outcome"],  # tracked, group_not_found, bank_not_in_stats
)


# =============================================================================
# Technical Metrics
# =============================================================================

quote_latency = Histogram(
    "vbank_quote_latency_seconds",
    "Quote request latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

config_backend_requests_total = Counter(
    "vbank_config_backend_requests_total",
    "Total number of config backend request attempts",
    ["method", "outcome"],  # success, retryable, terminal
)

config_backend_retries = Counter(
    "vbank_config_backend_retries_total",
    "Total number of config backend retries",
    ["method"],
)

config_backend_latency = Histogram(
    "vbank_config_backend_latency_seconds",
    "Config backend attempt latency in seconds",
    ["method"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

http_requests_total = Counter(
    "vbank_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "vbank_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_quote(outcome: str, lending_rate_in_percent: float | None = None) -> None:
    """Record a quote request outcome and, when quoted, its rate."""
    quote_total.labels(outcome=outcome).inc()
    if lending_rate_in_percent is not None:
        lending_rate.observe(lending_rate_in_percent)


def record_usage_tracked(outcome: str) -> None:
    """Record the outcome of a usage tracking step."""
    usage_tracked_total.labels(outcome=outcome).inc()


@contextmanager
def track_quote_latency() -> Generator[None, None, None]:
    """Context manager to track quote latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        quote_latency.observe(duration)


@contextmanager
def track_config_backend_latency(method: str) -> Generator[None, None, None]:
    """Context manager to track a single config backend attempt."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        config_backend_latency.labels(method=method).observe(duration)


def record_config_backend_attempt(method: str, outcome: str) -> None:
    """Record one config backend attempt and how it was classified."""
    config_backend_requests_total.labels(method=method, outcome=outcome).inc()


def record_config_backend_retry(method: str) -> None:
    """Record a config backend retry."""
    config_backend_retries.labels(method=method).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
