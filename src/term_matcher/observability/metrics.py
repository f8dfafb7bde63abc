"""Prometheus metrics for term matching."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, CollectorRegistry, Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


MATCH_ATTEMPTS = Counter(
    "term_matcher_attempts_total",
    "Matcher applications against a token",
    ["matcher"],
)

MATCH_RESULTS = Counter(
    "term_matcher_matches_total",
    "Matches produced by a matcher",
    ["matcher"],
)

APPLY_LATENCY = Histogram(
    "term_matcher_apply_seconds",
    "Time spent running a matcher set against one token",
    buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01),
)


def record_match_attempt(matcher_key: str, match_count: int) -> None:
    """Count one matcher application and the matches it produced."""
    MATCH_ATTEMPTS.labels(matcher=matcher_key).inc()
    if match_count:
        MATCH_RESULTS.labels(matcher=matcher_key).inc(match_count)


@contextmanager
def track_latency(histogram: Histogram = APPLY_LATENCY) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.observe(time.perf_counter() - start)


def get_metrics(registry: CollectorRegistry = REGISTRY) -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(registry)


def get_metrics_content_type() -> str:
    """Get content type for metrics endpoint."""
    return CONTENT_TYPE_LATEST
