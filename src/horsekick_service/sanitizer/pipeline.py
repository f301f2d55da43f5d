"""
Sanitization Pipeline: staged request sanitizer.

Runs a batch of rows through three stages, in order:
- Stage 1: Required columns (hard fail)
- Stage 2: Row filter on year bounds and corps membership (drops rows)
- Stage 3: Column projection

Stage 1 raises MissingColumnError. Stage 2 never raises; every dropped row is
logged and counted. Optionally one warning per category is emitted per batch;
its text is fixed so the warnings registry of a long-lived caller stays bounded.
"""

import warnings
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from ..config import Settings
from ..models.enums import DropReason
from ..models.output_models import DroppedRow, SanitizationResult
from ..monitoring.metrics import rows_dropped_total
from .exceptions import DroppedRowWarning, OutOfBoundsRow, UnknownCorpsRow
from .stage1_columns import Stage1RequiredColumns
from .stage2_row_filter import CORPS_COLUMN, YEAR_COLUMN, Stage2RowFilter
from .stage3_projection import Stage3Projection

logger = structlog.get_logger(__name__)

DEFAULT_REQUIRED_COLUMNS: tuple[str, ...] = (YEAR_COLUMN, CORPS_COLUMN)
DEFAULT_VALID_CORPS: frozenset[str] = frozenset({"G", "I", "II", "III", "IV"})
DEFAULT_YEAR_BOUNDS: tuple[int, int] = (1701, 1919)

WARNING_MESSAGES: dict[type[DroppedRowWarning], str] = {
    OutOfBoundsRow: "Rows dropped: a required value missing, or year malformed or out of bounds",
    UnknownCorpsRow: "Rows dropped: corps missing or not a known identifier",
}


def warning_category(dropped: DroppedRow) -> type[DroppedRowWarning]:
    """Map a dropped row to the warning category reported for it."""
    if dropped.reason == DropReason.UNKNOWN_CORPS or dropped.column == CORPS_COLUMN:
        return UnknownCorpsRow
    return OutOfBoundsRow


class SanitizationPipeline:
    """
    Staged sanitizer for tabular prediction requests.

    Stateless once constructed: the same instance is shared across requests.
    """

    def __init__(
        self,
        required_columns: Sequence[str] = DEFAULT_REQUIRED_COLUMNS,
        valid_corps: Iterable[str] = DEFAULT_VALID_CORPS,
        year_bounds: tuple[int, int] = DEFAULT_YEAR_BOUNDS,
        warn: bool = True,
    ):
        """
        Initialize sanitization pipeline.

        Args:
            required_columns: Columns kept on output; must include year and corps
            valid_corps: Known corps identifiers
            year_bounds: Inclusive (min, max) year range
            warn: Emit a DroppedRowWarning per category of excluded rows
        """
        required = tuple(dict.fromkeys(required_columns))
        for column in (YEAR_COLUMN, CORPS_COLUMN):
            if column not in required:
                raise ValueError(f"required_columns must include {column!r}")
        year_min, year_max = year_bounds
        if year_min > year_max:
            raise ValueError(f"Invalid year bounds: {year_bounds!r}")

        self.required_columns = required
        self.valid_corps = frozenset(valid_corps)
        self.year_bounds = (year_min, year_max)
        self.warn = warn

        self.stage1 = Stage1RequiredColumns(required)
        self.stage2 = Stage2RowFilter(required, self.valid_corps, self.year_bounds)
        self.stage3 = Stage3Projection(required)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SanitizationPipeline":
        """Build a pipeline from application settings."""
        return cls(
            required_columns=settings.REQUIRED_COLUMNS,
            valid_corps=settings.VALID_CORPS,
            year_bounds=settings.year_bounds,
            warn=settings.WARN_ON_DROPPED_ROWS,
        )

    def run(self, rows: Sequence[Mapping[str, Any]]) -> SanitizationResult:
        """
        Sanitize a batch of rows.

        Args:
            rows: Ordered rows (column name -> value); extra columns allowed

        Returns:
            SanitizationResult with projected rows and dropped-row records

        Raises:
            MissingColumnError: If a required column is absent from every row
        """
        rows = list(rows)

        self.stage1.validate(rows)
        kept, dropped = self.stage2.filter(rows)
        projected = self.stage3.project([row for _, row in kept])

        for record in dropped:
            rows_dropped_total.labels(reason=record.reason.value).inc()

        if self.warn:
            categories = {warning_category(record) for record in dropped}
            for category in (OutOfBoundsRow, UnknownCorpsRow):
                if category in categories:
                    warnings.warn(WARNING_MESSAGES[category], category, stacklevel=2)

        if dropped:
            logger.warning(
                "Rows dropped during sanitization",
                received=len(rows),
                kept=len(projected),
                dropped=len(dropped),
                rows=[record.describe() for record in dropped[:20]],
            )
        else:
            logger.debug("Sanitization completed with no dropped rows", received=len(rows))

        return SanitizationResult(rows=projected, dropped=dropped)


def sanitize(
    rows: Sequence[Mapping[str, Any]],
    required_columns: Sequence[str] = DEFAULT_REQUIRED_COLUMNS,
    valid_corps: Iterable[str] = DEFAULT_VALID_CORPS,
    year_bounds: tuple[int, int] = DEFAULT_YEAR_BOUNDS,
    warn: bool = True,
) -> list[dict[str, Any]]:
    """
    Validate, filter and project a batch of prediction rows.

    >>> sanitize([{"year": 1800, "corps": "II", "dummy": 1}])
    [{'year': 1800, 'corps': 'II'}]

    Raises:
        MissingColumnError: If a required column is absent from every row
    """
    pipeline = SanitizationPipeline(
        required_columns=required_columns,
        valid_corps=valid_corps,
        year_bounds=year_bounds,
        warn=warn,
    )
    return pipeline.run(rows).rows
