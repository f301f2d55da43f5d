"""
Stage 3: Column Projection.

Reduce each surviving row to exactly the required columns, in the order the
columns are configured. Row order is preserved.
"""

from collections.abc import Mapping, Sequence
from typing import Any


class Stage3Projection:
    """Stage 3: select the required columns from each row."""

    def __init__(self, required_columns: Sequence[str]):
        self.required_columns = tuple(required_columns)

    def project(self, rows: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
        return [{col: row[col] for col in self.required_columns} for row in rows]
