"""Prometheus metrics."""

from .metrics import (
    batch_size_rows,
    predictions_total,
    rows_dropped_total,
    sanitization_failures_total,
)

__all__ = [
    "batch_size_rows",
    "predictions_total",
    "rows_dropped_total",
    "sanitization_failures_total",
]
