"""Custom Prometheus metrics for the Horse-Kick Prediction Service.

These metrics are exposed at /metrics next to the HTTP metrics collected by
prometheus-fastapi-instrumentator. Alert rules worth configuring:
- sanitization_failures_total (clients sending batches without required columns)
- rows_dropped_total (upstream sending out-of-range years or unknown corps)
"""

from prometheus_client import Counter, Histogram

# === Sanitization Metrics ===

sanitization_failures_total = Counter(
    "sanitization_failures_total",
    "Total batches rejected by the sanitizer, by stage and error type",
    ["stage", "error_type"],
)
"""
Rejected batches counter.

Labels:
- stage: stage1 (required columns)
- error_type: missing_columns
"""

rows_dropped_total = Counter(
    "rows_dropped_total",
    "Total rows excluded during sanitization, by reason",
    ["reason"],
)
"""
Dropped rows counter.

Labels:
- reason: year_out_of_bounds, invalid_year, unknown_corps, missing_value

A steady rise in unknown_corps usually means the client uses a corps naming
scheme that differs from VALID_CORPS.
"""

# === Prediction Metrics ===

predictions_total = Counter(
    "predictions_total",
    "Total rows scored by the model",
    ["model_version"],
)

batch_size_rows = Histogram(
    "batch_size_rows",
    "Rows per prediction request, before sanitization",
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000],
)
