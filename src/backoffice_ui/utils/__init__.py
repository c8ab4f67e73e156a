"""Utility functions shared across the back-office UI package."""

from backoffice_ui.utils.record_helpers import (
    coerce_int,
    field_value,
    matches_query,
    parse_date,
    searchable_terms,
    sort_records,
)

__all__ = [
    "coerce_int",
    "field_value",
    "matches_query",
    "parse_date",
    "searchable_terms",
    "sort_records",
]
