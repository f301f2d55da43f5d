"""
Unit tests for Stage 2: Row Filter.
"""

import math

import pytest

from horsekick_service.models.enums import DropReason
from horsekick_service.sanitizer.stage2_row_filter import Stage2RowFilter, coerce_year


class TestCoerceYear:
    """Year interpretation rules."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1800, 1800),
            (1800.0, 1800),
            ("1800", 1800),
            (" 1848 ", 1848),
            ("+1848", 1848),
        ],
    )
    def test_integer_years(self, value, expected):
        assert coerce_year(value) == expected

    @pytest.mark.parametrize(
        "value",
        [True, False, 1800.5, "MDCCC", "", math.inf, [1800], "1_800", "\u0661\u0668\u0660\u0660", "\uff11\uff18\uff10\uff10", "18 00"],
    )
    def test_non_integer_years(self, value):
        assert coerce_year(value) is None


class TestStage2RowFilter:
    """Test suite for Stage 2 bounds and membership filtering."""

    def setup_method(self):
        """Setup test fixtures."""
        self.stage2 = Stage2RowFilter(
            required_columns=["year", "corps"],
            valid_corps={"G", "I", "II", "III", "IV"},
            year_bounds=(1701, 1919),
        )

    def test_valid_row_kept(self):
        kept, dropped = self.stage2.filter([{"year": 1848, "corps": "I"}])

        assert kept == [(0, {"year": 1848, "corps": "I"})]
        assert dropped == []

    def test_bounds_are_inclusive(self):
        """Rows exactly on the bounds survive."""
        kept, dropped = self.stage2.filter(
            [{"year": 1701, "corps": "G"}, {"year": 1919, "corps": "IV"}]
        )

        assert [index for index, _ in kept] == [0, 1]
        assert dropped == []

    @pytest.mark.parametrize("year", [1700, 1920, 1492, 2019, -5])
    def test_year_out_of_bounds_dropped(self, year):
        kept, dropped = self.stage2.filter([{"year": year, "corps": "I"}])

        assert kept == []
        assert dropped[0].reason == DropReason.YEAR_OUT_OF_BOUNDS
        assert dropped[0].column == "year"
        assert dropped[0].year == year

    @pytest.mark.parametrize("corps", ["XVI", "i", "", 1, None])
    def test_unknown_corps_dropped(self, corps):
        kept, dropped = self.stage2.filter([{"year": 1800, "corps": corps}])

        assert kept == []
        assert len(dropped) == 1
        assert dropped[0].column == "corps"

    def test_none_corps_reported_as_missing(self):
        _, dropped = self.stage2.filter([{"year": 1800, "corps": None}])

        assert dropped[0].reason == DropReason.MISSING_VALUE

    def test_row_missing_key_dropped(self):
        """A row lacking a required column is dropped, not fatal."""
        kept, dropped = self.stage2.filter(
            [{"year": 1800}, {"year": 1801, "corps": "I"}]
        )

        assert [index for index, _ in kept] == [1]
        assert dropped[0].index == 0
        assert dropped[0].reason == DropReason.MISSING_VALUE
        assert dropped[0].column == "corps"

    def test_nan_year_is_missing(self):
        _, dropped = self.stage2.filter([{"year": float("nan"), "corps": "I"}])

        assert dropped[0].reason == DropReason.MISSING_VALUE

    def test_invalid_year_dropped(self):
        _, dropped = self.stage2.filter([{"year": "eighteen hundred", "corps": "I"}])

        assert dropped[0].reason == DropReason.INVALID_YEAR

    def test_underscored_year_string_dropped(self):
        kept, dropped = self.stage2.filter([{"year": "1_800", "corps": "I"}])

        assert kept == []
        assert dropped[0].reason == DropReason.INVALID_YEAR

    def test_year_normalized_to_int(self):
        kept, _ = self.stage2.filter([{"year": "1800", "corps": "I"}, {"year": 1801.0, "corps": "I"}])

        assert [row["year"] for _, row in kept] == [1800, 1801]
        assert all(type(row["year"]) is int for _, row in kept)

    def test_year_checked_before_corps(self):
        """A row failing both predicates is reported for its year."""
        _, dropped = self.stage2.filter([{"year": 1600, "corps": "XVI"}])

        assert dropped[0].reason == DropReason.YEAR_OUT_OF_BOUNDS

    def test_input_rows_not_mutated(self):
        row = {"year": "1800", "corps": "I", "extra": 1}
        self.stage2.filter([row])

        assert row == {"year": "1800", "corps": "I", "extra": 1}
