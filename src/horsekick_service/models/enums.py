"""
Enumerations shared by the sanitizer and the API.
"""

from enum import Enum


class DropReason(str, Enum):
    """Why a row was excluded from a sanitized batch."""

    YEAR_OUT_OF_BOUNDS = "year_out_of_bounds"
    INVALID_YEAR = "invalid_year"
    UNKNOWN_CORPS = "unknown_corps"
    MISSING_VALUE = "missing_value"
