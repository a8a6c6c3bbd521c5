"""Local filter/search engine for resource page collections.

Pure functions: the input collection is never mutated, a new list is
always returned. Filters combine with logical AND.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from finance_dashboard.domain.entities import ListQuery, Record


def as_text(value: Any) -> str:
    """Render a scalar the way it is displayed and compared."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return " ".join(as_text(item) for item in value)
    return str(value)


def matches_text(record: Record, search_field: str | None, text_query: str) -> bool:
    """Case-insensitive substring match on the page's designated search field."""
    if not text_query:
        return True
    if search_field is None:
        return False
    return text_query.lower() in as_text(record.get(search_field)).lower()


def matches_filters(record: Record, filters: dict[str, str]) -> bool:
    """Exact match on every non-empty filter value."""
    for field_name, expected in filters.items():
        if expected in ("", None):
            continue
        if as_text(record.get(field_name)) != as_text(expected):
            return False
    return True


def filter_records(
    records: Sequence[Record],
    query: ListQuery,
    search_field: str | None,
) -> list[Record]:
    """Derive the visible view from the raw collection."""
    active = query.active_filters()
    return [
        record
        for record in records
        if matches_text(record, search_field, query.text_query)
        and matches_filters(record, active)
    ]


def distinct_values(records: Iterable[Record], field_name: str) -> list[str]:
    """Distinct, non-empty values of a field in first-seen order.

    Always computed from the raw collection so a chosen filter value never
    disappears from its own option list.
    """
    seen: dict[str, None] = {}
    for record in records:
        value = as_text(record.get(field_name))
        if value and value not in seen:
            seen[value] = None
    return list(seen)
