"""
Stage 2: Row Filter.

Keep a row only if:
- every required column holds a value (None and NaN count as missing)
- year is an integer within the configured inclusive bounds
- corps is one of the known identifiers

Rows failing a predicate are excluded and recorded as DroppedRow; this stage
never raises. Integral floats and numeric strings are accepted as years and
normalized to int on the surviving row.
"""

import math
import numbers
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

import structlog

from ..models.enums import DropReason
from ..models.output_models import DroppedRow

logger = structlog.get_logger(__name__)

YEAR_COLUMN = "year"
CORPS_COLUMN = "corps"

_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def coerce_year(value: Any) -> Optional[int]:
    """
    Interpret a value as a calendar year.

    Returns None when the value is not an integer year (bools, fractional
    numbers, strings other than plain ASCII digits).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        as_float = float(value)
        if math.isfinite(as_float) and as_float.is_integer():
            return int(as_float)
        return None
    if isinstance(value, str):
        text = value.strip()
        if _YEAR_PATTERN.fullmatch(text):
            return int(text)
        return None
    return None


class Stage2RowFilter:
    """
    Stage 2 filter: bounds and membership checks (non-blocking).

    Returns surviving rows plus a DroppedRow record per excluded row.
    """

    def __init__(
        self,
        required_columns: Sequence[str],
        valid_corps: Iterable[str],
        year_bounds: tuple[int, int],
    ):
        """
        Args:
            required_columns: Columns that must hold a value on every kept row
            valid_corps: Known corps identifiers
            year_bounds: Inclusive (min, max) year range
        """
        self.required_columns = tuple(required_columns)
        self.valid_corps = frozenset(valid_corps)
        self.year_min, self.year_max = year_bounds

    def filter(
        self, rows: Sequence[Mapping[str, Any]]
    ) -> tuple[list[tuple[int, dict[str, Any]]], list[DroppedRow]]:
        """
        Split a batch into kept and dropped rows.

        Returns:
            Tuple of (list of (input index, normalized row), list of DroppedRow)
        """
        kept: list[tuple[int, dict[str, Any]]] = []
        dropped: list[DroppedRow] = []

        for index, row in enumerate(rows):
            reason, column = self._check(row)
            if reason is not None:
                dropped.append(
                    DroppedRow(
                        index=index,
                        reason=reason,
                        column=column,
                        year=row.get(YEAR_COLUMN),
                        corps=row.get(CORPS_COLUMN),
                    )
                )
                continue

            normalized = dict(row)
            normalized[YEAR_COLUMN] = coerce_year(row[YEAR_COLUMN])
            kept.append((index, normalized))

        logger.debug("Stage 2: rows filtered", kept=len(kept), dropped=len(dropped))
        return kept, dropped

    def _check(self, row: Mapping[str, Any]) -> tuple[Optional[DropReason], str]:
        """Return (reason, column) for the first failing predicate, or (None, "")."""
        for column in self.required_columns:
            if _is_missing(row.get(column)):
                return DropReason.MISSING_VALUE, column

        year = coerce_year(row[YEAR_COLUMN])
        if year is None:
            return DropReason.INVALID_YEAR, YEAR_COLUMN
        if not self.year_min <= year <= self.year_max:
            return DropReason.YEAR_OUT_OF_BOUNDS, YEAR_COLUMN

        corps = row[CORPS_COLUMN]
        if not isinstance(corps, str) or corps not in self.valid_corps:
            return DropReason.UNKNOWN_CORPS, CORPS_COLUMN

        return None, ""
