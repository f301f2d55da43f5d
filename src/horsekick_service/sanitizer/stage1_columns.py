"""
Stage 1: Required Columns.

Check that every required column appears in the batch. A column counts as
present if at least one row carries it; rows that individually lack a column
are handled by the row filter in Stage 2.

This is a hard-fail stage: a missing column rejects the whole batch.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from ..monitoring.metrics import sanitization_failures_total
from .exceptions import MissingColumnError

logger = structlog.get_logger(__name__)


class Stage1RequiredColumns:
    """
    Stage 1 validator: required column presence.

    Raises MissingColumnError when a required column is absent from every row.
    """

    def __init__(self, required_columns: Sequence[str]):
        """
        Args:
            required_columns: Columns every batch must provide
        """
        self.required_columns = tuple(required_columns)

    def validate(self, rows: Sequence[Mapping[str, Any]]) -> None:
        """
        Validate column presence across the batch.

        An empty batch carries no columns, so every required column is missing.

        Raises:
            MissingColumnError: If any required column is absent from all rows
        """
        seen: set[str] = set()
        for row in rows:
            seen.update(row.keys())

        missing = [col for col in self.required_columns if col not in seen]
        if missing:
            sanitization_failures_total.labels(
                stage="stage1", error_type="missing_columns"
            ).inc()
            raise MissingColumnError(
                f"Missing required column(s): {', '.join(missing)}",
                missing_columns=missing,
                seen_columns=sorted(seen),
            )

        logger.debug("Stage 1: required columns present", columns=list(self.required_columns))
