"""Team messaging calls beyond the channel list page."""

import logging
from typing import Any

from pydantic import ValidationError

from finance_dashboard.application.interfaces import CollaboratorGateway
from finance_dashboard.application.schemas.enterprise import ChannelMessage, DirectMessage
from finance_dashboard.domain.exceptions import (
    CollaboratorError,
    DraftValidationError,
    FetchFailedError,
    MutationFailedError,
)

logger = logging.getLogger(__name__)

_BASE = "communications"


class CommunicationsService:
    """Channel messages, the user directory and direct messages."""

    def __init__(self, gateway: CollaboratorGateway):
        self._gateway = gateway

    async def list_users(self) -> list[dict[str, Any]]:
        try:
            return await self._gateway.list(f"{_BASE}/users", envelope="data")
        except CollaboratorError as exc:
            logger.warning("Fetching users failed: %s", exc)
            raise FetchFailedError("communications", "Failed to fetch users") from exc

    async def list_channel_messages(self, channel_id: int | str) -> list[ChannelMessage]:
        try:
            rows = await self._gateway.list(
                f"{_BASE}/channels/{channel_id}/messages", envelope="data"
            )
            return [ChannelMessage.model_validate(row) for row in rows]
        except (CollaboratorError, ValidationError) as exc:
            logger.warning("Fetching messages of channel %s failed: %s", channel_id, exc)
            raise FetchFailedError("communications", "Failed to fetch channel messages") from exc

    async def post_channel_message(
        self, channel_id: int | str, message: str
    ) -> list[ChannelMessage]:
        """Post a message, then reload the channel's messages."""
        if not message.strip():
            raise DraftValidationError(["message"])
        try:
            await self._gateway.post(
                f"{_BASE}/channels/{channel_id}/messages", {"message": message}
            )
        except CollaboratorError as exc:
            logger.warning("Posting to channel %s failed: %s", channel_id, exc)
            raise MutationFailedError("communications", "message", "Failed to send message") from exc
        return await self.list_channel_messages(channel_id)

    async def send_direct_message(self, message: DirectMessage) -> dict[str, Any]:
        try:
            reply = await self._gateway.post(f"{_BASE}/message", message.model_dump())
        except CollaboratorError as exc:
            logger.warning("Sending message to %s failed: %s", message.recipient, exc)
            raise MutationFailedError("communications", "message", "Failed to send message") from exc
        logger.info("Message sent to %s", message.recipient)
        return reply
