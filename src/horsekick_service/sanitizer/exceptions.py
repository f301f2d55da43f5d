"""
Sanitizer exceptions and warning categories.

- MissingColumnError is fatal for the whole batch (no partial result).
- DroppedRowWarning and its subclasses are non-fatal: the offending row is
  excluded and processing continues with the remaining rows.
"""

from typing import Any


class SanitizationError(Exception):
    """
    Base exception for all sanitization errors.

    Raised when a request batch cannot be sanitized at all.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize sanitization error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging/metrics
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class MissingColumnError(SanitizationError):
    """
    Stage 1: required columns absent from the batch.

    Raised when at least one required column does not appear in any row.
    """

    def __init__(
        self,
        message: str,
        missing_columns: list[str] | None = None,
        seen_columns: list[str] | None = None,
    ):
        """
        Initialize missing column error.

        Args:
            message: Error description
            missing_columns: Required columns not found in any row
            seen_columns: Columns that were present in at least one row
        """
        details: dict[str, Any] = {}
        if missing_columns:
            details["missing_columns"] = missing_columns
        if seen_columns is not None:
            details["seen_columns"] = seen_columns[:20]  # Limit to first 20

        super().__init__(message, details)
        self.missing_columns = missing_columns or []


class DroppedRowWarning(UserWarning):
    """A row was excluded from the batch during sanitization."""


class OutOfBoundsRow(DroppedRowWarning):
    """Row excluded because its year is missing, malformed or out of bounds."""


class UnknownCorpsRow(DroppedRowWarning):
    """Row excluded because its corps is not a known identifier."""
