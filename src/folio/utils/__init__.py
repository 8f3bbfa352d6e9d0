"""Utility functions for Folio."""

from folio.utils.date_utils import (
    InvalidDateError,
    MalformedRangeError,
    format_date,
    format_duration,
)
from folio.utils.sorting import sort_by_date_descending

__all__ = [
    "InvalidDateError",
    "MalformedRangeError",
    "format_date",
    "format_duration",
    "sort_by_date_descending",
]
