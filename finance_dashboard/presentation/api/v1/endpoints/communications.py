"""Team messaging endpoints: channel messages, users, direct messages."""

from fastapi import APIRouter, Depends, HTTPException, status

from finance_dashboard.application.schemas.enterprise import ChannelMessage, DirectMessage
from finance_dashboard.application.schemas.pages import ChannelMessageRequest
from finance_dashboard.application.services import CommunicationsService
from finance_dashboard.domain.exceptions import (
    DraftValidationError,
    FetchFailedError,
    MutationFailedError,
)
from finance_dashboard.infrastructure.dependencies import get_communications_service

router = APIRouter(prefix="/communications", tags=["Communications"])


@router.get("/users")
async def list_users(
    service: CommunicationsService = Depends(get_communications_service),
) -> list[dict]:
    try:
        return await service.list_users()
    except FetchFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.get("/channels/{channel_id}/messages", response_model=list[ChannelMessage])
async def list_messages(
    channel_id: str,
    service: CommunicationsService = Depends(get_communications_service),
) -> list[ChannelMessage]:
    try:
        return await service.list_channel_messages(channel_id)
    except FetchFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.post("/channels/{channel_id}/messages", response_model=list[ChannelMessage])
async def post_message(
    channel_id: str,
    data: ChannelMessageRequest,
    service: CommunicationsService = Depends(get_communications_service),
) -> list[ChannelMessage]:
    """Post to a channel and return its refreshed message list."""
    try:
        return await service.post_channel_message(channel_id, data.message)
    except DraftValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except (MutationFailedError, FetchFailedError) as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.post("/message")
async def send_message(
    data: DirectMessage,
    service: CommunicationsService = Depends(get_communications_service),
) -> dict:
    try:
        return await service.send_direct_message(data)
    except MutationFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
