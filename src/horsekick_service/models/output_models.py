"""
Output data models for sanitization.

These models describe the result of running a batch through the sanitizer:
the surviving rows (projected to the required columns) plus a record of every
row that was excluded and why.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import DropReason


class DroppedRow(BaseModel):
    """A row excluded during sanitization, with its identifying values."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Position of the row in the input batch")
    reason: DropReason = Field(..., description="Why the row was excluded")
    column: str = Field(..., description="Column whose value caused the exclusion")
    year: Optional[Any] = Field(None, description="Year value as received")
    corps: Optional[Any] = Field(None, description="Corps value as received")

    def describe(self) -> str:
        """One-line description used in warnings and API responses."""
        return f"row {self.index} (year={self.year!r}, corps={self.corps!r}): {self.reason.value}"


class SanitizationResult(BaseModel):
    """Sanitized rows and the rows that were dropped to produce them."""

    rows: list[dict[str, Any]] = Field(default_factory=list)
    dropped: list[DroppedRow] = Field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return len(self.dropped)
