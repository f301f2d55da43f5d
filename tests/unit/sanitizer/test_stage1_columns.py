"""
Unit tests for Stage 1: Required Columns.
"""

import pytest

from horsekick_service.sanitizer.exceptions import MissingColumnError, SanitizationError
from horsekick_service.sanitizer.stage1_columns import Stage1RequiredColumns


class TestStage1RequiredColumns:
    """Test suite for Stage 1 required column checks."""

    def setup_method(self):
        """Setup test fixtures."""
        self.stage1 = Stage1RequiredColumns(["year", "corps"])

    def test_all_columns_present(self):
        """Batch with both required columns passes."""
        self.stage1.validate([{"year": 1800, "corps": "I", "extra": 1}])

    def test_missing_year_raises(self):
        """Batch without year anywhere is rejected."""
        with pytest.raises(MissingColumnError) as exc_info:
            self.stage1.validate([{"corps": "I"}, {"corps": "II"}])

        assert exc_info.value.missing_columns == ["year"]
        assert "year" in str(exc_info.value)

    def test_missing_both_columns_lists_both(self):
        """All missing columns are reported, in configured order."""
        with pytest.raises(MissingColumnError) as exc_info:
            self.stage1.validate([{"deaths": 0}])

        assert exc_info.value.missing_columns == ["year", "corps"]
        assert exc_info.value.details["seen_columns"] == ["deaths"]

    def test_column_present_in_some_rows_passes(self):
        """A column carried by at least one row counts as present."""
        self.stage1.validate([{"year": 1800}, {"corps": "I"}])

    def test_empty_batch_raises(self):
        """Empty batch has no columns at all, so every required column is missing."""
        with pytest.raises(MissingColumnError) as exc_info:
            self.stage1.validate([])

        assert exc_info.value.missing_columns == ["year", "corps"]

    def test_missing_column_error_is_sanitization_error(self):
        """MissingColumnError can be caught through the base class."""
        with pytest.raises(SanitizationError):
            self.stage1.validate([{"year": 1800}])
