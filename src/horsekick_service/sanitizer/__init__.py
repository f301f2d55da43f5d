"""
Staged request sanitizer (3 stages).

- pipeline.py: SanitizationPipeline orchestrator and the sanitize() helper
- stage1_columns.py: Required column presence (hard fail)
- stage2_row_filter.py: Year bounds and corps membership (drops rows)
- stage3_projection.py: Projection onto the required columns
- exceptions.py: MissingColumnError and dropped-row warning categories
"""

from .exceptions import (
    DroppedRowWarning,
    MissingColumnError,
    OutOfBoundsRow,
    SanitizationError,
    UnknownCorpsRow,
)
from .pipeline import SanitizationPipeline, sanitize

__all__ = [
    # Main pipeline
    "SanitizationPipeline",
    "sanitize",
    # Exceptions (for API error handling)
    "SanitizationError",
    "MissingColumnError",
    # Warning categories
    "DroppedRowWarning",
    "OutOfBoundsRow",
    "UnknownCorpsRow",
]
