"""Unit tests for goal progress maths."""

import pytest

from finance_dashboard.application.services.goal_progress import (
    goal_row_extras,
    progress_percent,
)
from finance_dashboard.domain.entities import Record


@pytest.mark.parametrize(
    "current, target, expected",
    [
        (550, 1000, 55.0),
        (0, 1000, 0.0),
        (1500, 1000, 100.0),
        (-20, 1000, 0.0),
        (100, 0, 0.0),
        (None, 1000, 0.0),
    ],
)
def test_progress_percent_is_clamped(current, target, expected):
    assert progress_percent(current, target) == expected


def test_goal_row_extras_rounds_percentage():
    record = Record(1, {"name": "Reserve", "target_amount": 3.0, "current_amount": 1.0})
    assert goal_row_extras(record) == {"progress_percent": 33.33}
