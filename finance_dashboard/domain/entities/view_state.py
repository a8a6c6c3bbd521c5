"""Domain entities describing list and form state of a resource page."""

from dataclasses import dataclass, field
from enum import Enum


class ViewState(str, Enum):
    """Lifecycle of the raw collection held by a page."""

    EMPTY = "empty"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class FormState(str, Enum):
    """Modal form state."""

    CLOSED = "closed"
    OPEN = "open"


class FormMode(str, Enum):
    """Whether an open form creates a new record or edits an existing one."""

    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True)
class ListQuery:
    """Free-text search plus attribute-equality filters.

    An empty filter value means "no constraint".
    """

    text_query: str = ""
    filters: dict[str, str] = field(default_factory=dict)

    def active_filters(self) -> dict[str, str]:
        return {name: value for name, value in self.filters.items() if value not in ("", None)}
