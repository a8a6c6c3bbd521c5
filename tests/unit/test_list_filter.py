"""Unit tests for the local filter/search engine."""

from finance_dashboard.application.services.list_filter import (
    as_text,
    distinct_values,
    filter_records,
)
from finance_dashboard.domain.entities import ListQuery, Record


def _budgets() -> list[Record]:
    return [
        Record(1, {"department": "Ops", "title": "Q1 Supplies", "amount_planned": 500.0}, "Open"),
        Record(2, {"department": "Finance", "title": "Audit", "amount_planned": 1200.0}, "Open"),
        Record(3, {"department": "Ops", "title": "Office chairs", "amount_planned": 300.0}, "Closed"),
    ]


def test_text_query_is_case_insensitive_substring():
    result = filter_records(_budgets(), ListQuery(text_query="SUPP"), "title")
    assert [r.id for r in result] == [1]


def test_text_query_only_matches_search_field():
    result = filter_records(_budgets(), ListQuery(text_query="finance"), "title")
    assert result == []


def test_empty_filter_value_means_no_constraint():
    query = ListQuery(filters={"department": "", "status": ""})
    assert len(filter_records(_budgets(), query, "title")) == 3


def test_filters_combine_with_and():
    query = ListQuery(filters={"department": "Ops", "status": "Closed"})
    result = filter_records(_budgets(), query, "title")
    assert [r.id for r in result] == [3]


def test_text_and_filters_combine():
    query = ListQuery(text_query="o", filters={"department": "Ops"})
    result = filter_records(_budgets(), query, "title")
    assert [r.id for r in result] == [3]


def test_filter_is_pure():
    records = _budgets()
    before = [r.to_dict() for r in records]
    filter_records(records, ListQuery(text_query="audit"), "title")
    assert [r.to_dict() for r in records] == before
    assert len(records) == 3


def test_filter_matches_dotted_path():
    records = [
        Record(1, {"name": "Acme", "settings": {"currency": "USD"}}),
        Record(2, {"name": "Globex", "settings": {"currency": "EUR"}}),
    ]
    query = ListQuery(filters={"settings.currency": "EUR"})
    assert [r.id for r in filter_records(records, query, "name")] == [2]


def test_no_search_field_rejects_text_query():
    assert filter_records(_budgets(), ListQuery(text_query="x"), None) == []


def test_distinct_values_first_seen_order_without_blanks():
    records = _budgets() + [Record(4, {"department": "", "title": "Blank"})]
    assert distinct_values(records, "department") == ["Ops", "Finance"]


def test_as_text_renders_scalars():
    assert as_text(None) == ""
    assert as_text(True) == "true"
    assert as_text(500.0) == "500"
    assert as_text(12.5) == "12.5"
    assert as_text(["a:read", "a:write"]) == "a:read a:write"


def test_sequential_filters_equal_combined_filter():
    records = _budgets()
    first = ListQuery(filters={"department": "Ops"})
    second = ListQuery(filters={"status": "Open"})
    combined = ListQuery(filters={"department": "Ops", "status": "Open"})

    chained = filter_records(filter_records(records, first, "title"), second, "title")
    reversed_order = filter_records(filter_records(records, second, "title"), first, "title")

    assert chained == filter_records(records, combined, "title")
    assert reversed_order == chained
