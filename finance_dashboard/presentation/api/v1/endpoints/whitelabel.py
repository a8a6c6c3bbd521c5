"""White-label branding endpoints."""

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from finance_dashboard.application.schemas.enterprise import WhiteLabelSettings
from finance_dashboard.application.services import WhiteLabelService
from finance_dashboard.domain.entities import SessionUser
from finance_dashboard.domain.exceptions import FetchFailedError, MutationFailedError
from finance_dashboard.infrastructure.dependencies import get_whitelabel_service, require_user

router = APIRouter(prefix="/whitelabel", tags=["White-label"])


@router.get("", response_model=WhiteLabelSettings)
async def get_whitelabel(
    service: WhiteLabelService = Depends(get_whitelabel_service),
) -> WhiteLabelSettings:
    try:
        return await service.load()
    except FetchFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.put("", response_model=WhiteLabelSettings)
async def save_whitelabel(
    data: WhiteLabelSettings,
    service: WhiteLabelService = Depends(get_whitelabel_service),
) -> WhiteLabelSettings:
    try:
        return await service.save(data)
    except MutationFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.post("/logo", response_model=WhiteLabelSettings)
async def upload_logo(
    file: UploadFile,
    service: WhiteLabelService = Depends(get_whitelabel_service),
) -> WhiteLabelSettings:
    """Upload a logo and return the current settings pointing at it (not yet saved)."""
    try:
        current = await service.load()
        return await service.upload_logo(current, file.filename or "logo", await file.read())
    except FetchFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    except MutationFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.post("/reset", response_model=WhiteLabelSettings)
async def reset_whitelabel(_user: SessionUser = Depends(require_user)) -> WhiteLabelSettings:
    """Default branding, returned for preview; PUT it to persist."""
    return WhiteLabelService.reset_to_defaults()
