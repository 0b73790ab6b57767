"""Observability package."""

from community_connectors.observability.metrics import (
    UPSTREAM_REQUESTS,
    PAGES_FETCHED,
    DATA_REQUESTS,
    DATA_LATENCY,
    ROWS_RETURNED,
    get_metrics,
)

__all__ = [
    "UPSTREAM_REQUESTS",
    "PAGES_FETCHED",
    "DATA_REQUESTS",
    "DATA_LATENCY",
    "ROWS_RETURNED",
    "get_metrics",
]
