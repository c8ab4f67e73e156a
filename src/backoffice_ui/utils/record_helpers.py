"""
Utility functions for record field access, matching and sorting.

Provides helpers for:
- Dotted key path access into nested records (via python-benedict)
- Case-insensitive search matching against an entity's search fields
- Lenient integer coercion for pagination inputs
- Date parsing and record sorting used by the demo service
"""

from datetime import datetime
from typing import Any, Iterable, Mapping, Sequence

from benedict import benedict


def _keypath_dict(record: Mapping[str, Any]) -> benedict:
    # Record keys may contain dots ("5.0"), so paths are looked up as keylists
    return benedict(record, keypath_separator=None)


def field_value(record: Mapping[str, Any], path: str) -> Any:
    """
    Return the value at a dotted key path, or None when missing.

    Args:
        record: Entity record (nested dicts allowed).
        path: Dotted key path such as "vendorInfo.vendor_name".
    """
    if "." not in path:
        return record.get(path)
    return _keypath_dict(record).get(path.split("."))


def searchable_terms(record: Mapping[str, Any], fields: Iterable[str]) -> list[str]:
    """Return the lowercased, non-empty values of the given fields."""
    b = _keypath_dict(record)
    terms = []
    for path in fields:
        value = b.get(path.split(".")) if "." in path else record.get(path)
        if value is None or isinstance(value, (dict, list)):
            continue
        text = str(value)
        if text:
            terms.append(text.lower())
    return terms


def matches_query(record: Mapping[str, Any], query: str, fields: Iterable[str]) -> bool:
    """
    Check if a record matches the search query.

    Performs case-insensitive substring matching against the values of
    the given search fields.

    Returns:
        True if query matches any field, or if query is blank.
    """
    normalized = query.strip().lower()
    if not normalized:
        return True
    return any(normalized in value for value in searchable_terms(record, fields))


def coerce_int(value: Any) -> int | None:
    """
    Convert pagination input to an int, or None if it is not numeric.

    Accepts ints and numeric strings (form inputs deliver strings);
    rejects bools, floats with a fraction, and everything else.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return None
    return None


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse an ISO or m/d/y date string.

    Returns:
        datetime object if parsing succeeds, None otherwise.
    """
    if date_str:
        date_str = str(date_str).strip()
    if not date_str:
        return None

    try:
        return datetime.fromisoformat(date_str.replace("Z", "+00:00")).replace(
            tzinfo=None
        )
    except ValueError:
        pass

    for fmt in ("%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue
    return None


def sort_records(
    records: Sequence[Mapping[str, Any]], sort_by: str, descending: bool = False
) -> list[Mapping[str, Any]]:
    """
    Sort records by a dotted field.

    Numbers compare numerically and strings case-insensitively; records
    missing the field always sort last.
    """
    present = [r for r in records if field_value(r, sort_by) is not None]
    missing = [r for r in records if field_value(r, sort_by) is None]

    def _key(record: Mapping[str, Any]) -> tuple:
        value = field_value(record, sort_by)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return (0, value, "")
        return (1, 0, str(value).lower())

    return sorted(present, key=_key, reverse=descending) + missing
