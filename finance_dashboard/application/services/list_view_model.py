"""Generic list view-model shared by every resource page.

One instance backs one mounted page: it fetches the raw collection,
derives the filtered view, exports it to CSV, owns the modal form, and
dispatches create/update/delete calls followed by a full refetch.
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from finance_dashboard.application.interfaces import CollaboratorGateway
from finance_dashboard.domain.entities import FormMode, ListQuery, Record, ViewState
from finance_dashboard.domain.exceptions import (
    CollaboratorError,
    EntityNotFoundError,
    FetchFailedError,
    MutationFailedError,
)

from .csv_exporter import CsvExport, export_csv
from .form_controller import FormController
from .list_filter import distinct_values, filter_records
from .resource_pages import ResourcePage

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]


class ListViewModel:
    """Fetch / filter / export / mutate bundle for one resource page."""

    def __init__(self, page: ResourcePage, gateway: CollaboratorGateway):
        self.page = page
        self._gateway = gateway
        self.state = ViewState.EMPTY
        self.records: list[Record] = []
        self.error: str | None = None
        self.notice: str | None = None
        self.query = ListQuery()
        self.form = FormController(page)

    @property
    def gateway(self) -> CollaboratorGateway:
        return self._gateway

    # ── Remote Collection Fetcher ───────────────────────────────────

    async def mount(self) -> list[Record]:
        """Initial load when the page is opened."""
        return await self.fetch()

    async def fetch(self) -> list[Record]:
        """Replace the raw collection with a fresh GET.

        On failure the page moves to the error state with its static
        message and no data.
        """
        self.state = ViewState.LOADING
        try:
            rows = await self._gateway.list(
                self.page.collection_path, envelope=self.page.envelope
            )
            records = [self._to_record(row) for row in rows]
        except (CollaboratorError, ValidationError, KeyError) as exc:
            logger.warning("Fetching %s failed: %s", self.page.name, exc)
            self.state = ViewState.ERROR
            self.records = []
            self.error = self.page.fetch_error
            return self.records

        self.records = records
        self.state = ViewState.LOADED
        self.error = None
        logger.debug("Loaded %d %s", len(records), self.page.name)
        return self.records

    def _to_record(self, row: Any) -> Record:
        """Check the row against the page schema, keep the wire values as sent."""
        self.page.record_schema.model_validate(row)
        return Record.from_payload(row, self.page.id_field)

    def find(self, record_id: str | int) -> Record | None:
        """Locate a record of the raw collection; ids compare as text."""
        key = str(record_id)
        for record in self.records:
            if str(record.id) == key:
                return record
        return None

    # ── Local Filter/Search Engine ──────────────────────────────────

    def search(self, text_query: str) -> list[Record]:
        self.query = ListQuery(text_query=text_query, filters=dict(self.query.filters))
        return self.view

    def set_filter(self, field_name: str, value: str) -> list[Record]:
        if field_name not in self.page.filterable_fields:
            raise ValueError(f"'{field_name}' is not filterable on {self.page.name}")
        filters = dict(self.query.filters)
        filters[field_name] = value
        self.query = ListQuery(text_query=self.query.text_query, filters=filters)
        return self.view

    def apply_query(self, text_query: str = "", filters: dict[str, str] | None = None) -> list[Record]:
        """Replace the whole query at once."""
        self.query = ListQuery(text_query=text_query)
        for field_name, value in (filters or {}).items():
            self.set_filter(field_name, value)
        return self.view

    @property
    def view(self) -> list[Record]:
        """Filtered projection of the raw collection, recomputed on every access."""
        return filter_records(self.records, self.query, self.page.search_field)

    @property
    def filter_options(self) -> dict[str, list[str]]:
        return {
            field_name: distinct_values(self.records, field_name)
            for field_name in self.page.filterable_fields
        }

    def rows(self) -> list[dict[str, Any]]:
        """The filtered view flattened for rendering."""
        rows = []
        for record in self.view:
            row = record.to_dict()
            if self.page.row_extras is not None:
                row.update(self.page.row_extras(record))
            rows.append(row)
        return rows

    # ── CSV Exporter ────────────────────────────────────────────────

    def export(self) -> CsvExport:
        return export_csv(self.view, self.page.csv_columns, self.page.csv_filename)

    # ── Mutation Dispatcher ─────────────────────────────────────────

    async def create(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            created = await self._gateway.create(self.page.endpoint, payload)
        except CollaboratorError as exc:
            raise self._failure("create", self.page.create_error, exc) from exc
        logger.info("Created %s", self.page.noun)
        await self.fetch()
        return created

    async def update(self, record_id: str | int, partial: dict[str, Any]) -> dict[str, Any]:
        try:
            updated = await self._gateway.update(self.page.endpoint, record_id, partial)
        except CollaboratorError as exc:
            raise self._failure("update", self.page.update_error, exc) from exc
        logger.info("Updated %s %s", self.page.noun, record_id)
        await self.fetch()
        return updated

    async def remove(self, record_id: str | int, confirm: ConfirmCallback) -> bool:
        """Delete after an explicit confirmation.

        Returns False without any network call when the confirmation is
        declined. The row is stripped locally before the DELETE is issued
        and restored if the call fails.
        """
        if not confirm(self.page.delete_prompt(record_id)):
            logger.debug("Delete of %s %s not confirmed", self.page.noun, record_id)
            return False

        snapshot = self.records
        self.records = [record for record in snapshot if str(record.id) != str(record_id)]
        try:
            await self._gateway.delete(self.page.endpoint, record_id)
        except CollaboratorError as exc:
            self.records = snapshot
            raise self._failure("delete", self.page.delete_error, exc) from exc
        logger.info("Deleted %s %s", self.page.noun, record_id)
        await self.fetch()
        return True

    async def run_action(self, record_id: str | int, action: str) -> dict[str, Any]:
        """POST ``{endpoint}/{id}/{action}`` (sync, join ...) then refetch."""
        if action not in self.page.actions:
            raise ValueError(f"Action '{action}' is not available on {self.page.name}")
        try:
            reply = await self._gateway.post(f"{self.page.endpoint}/{record_id}/{action}")
        except CollaboratorError as exc:
            raise self._failure(action, self.page.action_error(action), exc) from exc
        await self.fetch()
        return reply

    async def download(self, record_id: str | int | None = None) -> bytes:
        """Fetch one record's blob, or the bulk blob when no id is given."""
        path = (
            f"{self.page.endpoint}/{record_id}/download"
            if record_id is not None
            else f"{self.page.endpoint}/download"
        )
        try:
            return await self._gateway.download(path)
        except CollaboratorError as exc:
            logger.warning("Download from %s failed: %s", path, exc)
            raise FetchFailedError(self.page.name, self.page.download_error) from exc

    def _failure(
        self, operation: str, message: str, exc: CollaboratorError
    ) -> MutationFailedError:
        logger.warning("%s %s failed: %s", operation.capitalize(), self.page.noun, exc)
        self.notice = message
        return MutationFailedError(self.page.name, operation, message)

    # ── Form State Controller ───────────────────────────────────────

    def open_create(self) -> None:
        self.form.open_create()

    def open_edit(self, record_id: str | int) -> None:
        if not self.page.supports_edit:
            raise ValueError(f"{self.page.title} records cannot be edited")
        record = self.find(record_id)
        if record is None:
            raise EntityNotFoundError(self.page.noun, record_id)
        self.form.open_edit(record)

    def cancel(self) -> None:
        self.form.cancel()

    async def submit(self) -> dict[str, Any]:
        """Validate the draft, dispatch create or update, close on success."""
        payload = self.form.validate()
        if self.form.mode is FormMode.EDIT and self.form.editing_id is not None:
            result = await self.update(self.form.editing_id, payload)
        else:
            result = await self.create(payload)
        self.form.reset()
        self.notice = None
        return result
