"""Form state controller — owns the draft record of a resource page's modal."""

import logging
from typing import Any

from pydantic import ValidationError

from finance_dashboard.domain.entities import FormMode, FormState, Record
from finance_dashboard.domain.exceptions import DraftValidationError

from .resource_pages import ResourcePage

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


class FormController:
    """Closed/Open state machine around a draft record.

    ``Closed -> Open`` on open_create/open_edit, ``Open -> Open`` on every
    field edit, ``Open -> Closed`` on cancel or reset after a successful
    submit. A failed submit leaves the form open with the draft intact.
    """

    def __init__(self, page: ResourcePage):
        self._page = page
        self.state = FormState.CLOSED
        self.mode = FormMode.CREATE
        self.editing_id: str | int | None = None
        self.draft: dict[str, Any] = page.new_draft()

    @property
    def is_open(self) -> bool:
        return self.state is FormState.OPEN

    def open_create(self) -> None:
        self.state = FormState.OPEN
        self.mode = FormMode.CREATE
        self.editing_id = None
        self.draft = self._page.new_draft()

    def open_edit(self, record: Record) -> None:
        """Open the form pre-populated from an existing record."""
        draft = self._page.new_draft()
        for key in draft:
            value = record.get(key)
            if value is not None:
                draft[key] = value
        self.state = FormState.OPEN
        self.mode = FormMode.EDIT
        self.editing_id = record.id
        self.draft = draft

    def set_field(self, name: str, value: Any) -> None:
        if not self.is_open:
            raise ValueError("Cannot edit a closed form")
        if name not in self.draft:
            raise ValueError(f"Unknown field '{name}' for {self._page.name}")
        self.draft[name] = value

    def set_fields(self, values: dict[str, Any]) -> None:
        for name, value in values.items():
            self.set_field(name, value)

    def cancel(self) -> None:
        """Discard the draft unconditionally."""
        self.reset()

    def reset(self) -> None:
        self.state = FormState.CLOSED
        self.mode = FormMode.CREATE
        self.editing_id = None
        self.draft = self._page.new_draft()

    def validate(self) -> dict[str, Any]:
        """Check required fields and coerce the draft into a request body.

        Raises DraftValidationError before any network call is made.
        """
        missing = [
            name for name in self._page.required_fields if _is_blank(self.draft.get(name))
        ]
        if missing:
            raise DraftValidationError(missing)

        # Empty optional inputs fall back to the schema defaults.
        submitted = {key: value for key, value in self.draft.items() if value != ""}
        try:
            body = self._page.draft_schema.model_validate(submitted)
        except ValidationError as exc:
            errors = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ]
            logger.debug("Draft for %s rejected: %s", self._page.name, errors)
            raise DraftValidationError([], errors) from exc
        return body.model_dump(mode="json")
