"""Observability module for structured logging and Prometheus metrics."""

from term_matcher.observability.logging import JsonFormatter, configure_logging, configure_logging_from_settings
from term_matcher.observability.metrics import (
    APPLY_LATENCY,
    MATCH_ATTEMPTS,
    MATCH_RESULTS,
    get_metrics,
    get_metrics_content_type,
    record_match_attempt,
    track_latency,
)


__all__ = [
    "APPLY_LATENCY",
    "MATCH_ATTEMPTS",
    "MATCH_RESULTS",
    "JsonFormatter",
    "configure_logging",
    "configure_logging_from_settings",
    "get_metrics",
    "get_metrics_content_type",
    "record_match_attempt",
    "track_latency",
]
