"""Goal progress maths and the "add amount" contribution flow."""

import logging
from typing import TYPE_CHECKING, Any

from finance_dashboard.domain.entities import Record
from finance_dashboard.domain.exceptions import EntityNotFoundError

if TYPE_CHECKING:
    from .list_view_model import ListViewModel

logger = logging.getLogger(__name__)


def _number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def progress_percent(current_amount: Any, target_amount: Any) -> float:
    """Progress-bar ratio in percent, clamped to [0, 100]."""
    target = _number(target_amount)
    if target <= 0:
        return 0.0
    ratio = _number(current_amount) / target * 100
    return max(0.0, min(ratio, 100.0))


def goal_row_extras(record: Record) -> dict[str, Any]:
    """Computed columns rendered next to each goal."""
    return {
        "progress_percent": round(
            progress_percent(record.get("current_amount"), record.get("target_amount")), 2
        )
    }


async def contribute(view_model: "ListViewModel", goal_id: str | int, delta: Any) -> Record:
    """Add ``delta`` to a goal's current amount and persist it via update.

    Returns the refreshed goal from the refetched collection.
    """
    goal = view_model.find(goal_id)
    if goal is None:
        raise EntityNotFoundError("Goal", goal_id)

    new_amount = _number(goal.get("current_amount")) + _number(delta)
    logger.info("Goal %s: current_amount %s -> %s", goal.id, goal.get("current_amount"), new_amount)
    await view_model.update(goal.id, {"current_amount": new_amount})

    refreshed = view_model.find(goal.id)
    if refreshed is None:
        raise EntityNotFoundError("Goal", goal_id)
    return refreshed
