"""Resource page endpoints — list, filter, export and mutate any registered page."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status

from finance_dashboard.application.schemas.pages import ActionResult, PageInfo, PageView
from finance_dashboard.application.services import PAGES, ListViewModel
from finance_dashboard.domain.entities import SessionUser
from finance_dashboard.domain.exceptions import (
    DraftValidationError,
    EntityNotFoundError,
    FetchFailedError,
    MutationFailedError,
)
from finance_dashboard.infrastructure.dependencies import get_view_model, require_user

router = APIRouter(prefix="/pages", tags=["Pages"])


def page_view(view_model: ListViewModel) -> PageView:
    """Render the mounted view-model's current state."""
    rows = view_model.rows()
    return PageView(
        page=view_model.page.name,
        title=view_model.page.title,
        state=view_model.state.value,
        error=view_model.error,
        query=view_model.query.text_query,
        filters=view_model.query.active_filters(),
        total=len(view_model.records),
        count=len(rows),
        records=rows,
        filter_options=view_model.filter_options,
    )


async def mount_page(view_model: ListViewModel) -> None:
    """Initial fetch; a failed load is reported with the page's static message."""
    await view_model.mount()
    if view_model.error is not None:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=view_model.error)


def _parse_filters(raw: list[str]) -> dict[str, str]:
    filters: dict[str, str] = {}
    for item in raw:
        name, sep, value = item.partition(":")
        if not sep or not name:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Filter '{item}' must look like field:value",
            )
        filters[name] = value
    return filters


def _apply_query(view_model: ListViewModel, q: str, raw_filters: list[str]) -> None:
    try:
        view_model.apply_query(q, _parse_filters(raw_filters))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


async def _submit(view_model: ListViewModel, data: dict[str, Any]) -> None:
    try:
        view_model.form.set_fields(data)
        await view_model.submit()
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except DraftValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(e), "missing": e.missing, "errors": e.errors},
        )
    except MutationFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": e.message, "draft": view_model.form.draft},
        )


@router.get("", response_model=list[PageInfo])
async def list_pages(_user: SessionUser = Depends(require_user)) -> list[PageInfo]:
    """Describe every registered resource page."""
    return [
        PageInfo(
            name=page.name,
            title=page.title,
            search_field=page.search_field,
            filterable_fields=list(page.filterable_fields),
            csv_filename=page.csv_filename,
            supports_edit=page.supports_edit,
            actions=sorted(page.actions),
            field_choices={name: list(values) for name, values in page.field_choices.items()},
        )
        for page in PAGES.values()
    ]


@router.get("/{page}", response_model=PageView)
async def show_page(
    q: str = Query("", description="Free-text search on the page's search field"),
    filter: list[str] = Query([], description="Equality filter as field:value"),
    view_model: ListViewModel = Depends(get_view_model),
) -> PageView:
    """Fetch the collection and return the filtered view."""
    await mount_page(view_model)
    _apply_query(view_model, q, filter)
    return page_view(view_model)


@router.get("/{page}/export")
async def export_page(
    q: str = Query(""),
    filter: list[str] = Query([]),
    view_model: ListViewModel = Depends(get_view_model),
) -> Response:
    """Download the filtered view as CSV."""
    await mount_page(view_model)
    _apply_query(view_model, q, filter)
    export = view_model.export()
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": export.content_disposition},
    )


@router.get("/{page}/download")
async def download_all(view_model: ListViewModel = Depends(get_view_model)) -> Response:
    """Proxy the collaborator's bulk download."""
    try:
        content = await view_model.download()
    except FetchFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    return Response(
        content=content,
        media_type="application/octet-stream",
        headers={"Content-Disposition": f'attachment; filename="{view_model.page.name}"'},
    )


@router.post("/{page}/records", response_model=PageView, status_code=status.HTTP_201_CREATED)
async def create_record(
    data: dict[str, Any] = Body(...),
    view_model: ListViewModel = Depends(get_view_model),
) -> PageView:
    """Fill the add form with ``data``, submit it, and return the refreshed view."""
    await mount_page(view_model)
    view_model.open_create()
    await _submit(view_model, data)
    return page_view(view_model)


@router.put("/{page}/records/{record_id}", response_model=PageView)
async def update_record(
    record_id: str,
    data: dict[str, Any] = Body(...),
    view_model: ListViewModel = Depends(get_view_model),
) -> PageView:
    """Open the edit form for a record, apply ``data`` and submit."""
    await mount_page(view_model)
    try:
        view_model.open_edit(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, detail=str(e))
    await _submit(view_model, data)
    return page_view(view_model)


@router.delete("/{page}/records/{record_id}", response_model=PageView)
async def delete_record(
    record_id: str,
    confirm: bool = Query(False, description="Answer to the delete confirmation prompt"),
    view_model: ListViewModel = Depends(get_view_model),
) -> PageView:
    """Delete a record; refused with 409 unless the confirmation is given."""
    await mount_page(view_model)
    try:
        deleted = await view_model.remove(record_id, confirm=lambda _prompt: confirm)
    except MutationFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=view_model.page.delete_prompt(record_id),
        )
    return page_view(view_model)


@router.post("/{page}/records/{record_id}/actions/{action}", response_model=ActionResult)
async def run_action(
    record_id: str,
    action: str,
    view_model: ListViewModel = Depends(get_view_model),
) -> ActionResult:
    """Trigger a record action such as ``sync`` or ``join``."""
    await mount_page(view_model)
    try:
        reply = await view_model.run_action(record_id, action)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MutationFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    return ActionResult(reply=reply if isinstance(reply, dict) else {}, view=page_view(view_model))


@router.get("/{page}/records/{record_id}/download")
async def download_record(
    record_id: str,
    view_model: ListViewModel = Depends(get_view_model),
) -> Response:
    """Proxy the collaborator's per-record download."""
    try:
        content = await view_model.download(record_id)
    except FetchFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    return Response(
        content=content,
        media_type="application/octet-stream",
        headers={
            "Content-Disposition": f'attachment; filename="{view_model.page.name}-{record_id}"'
        },
    )
