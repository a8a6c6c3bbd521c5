"""Application service for the singleton white-label branding record."""

import logging

from finance_dashboard.application.interfaces import CollaboratorGateway
from finance_dashboard.application.schemas.enterprise import (
    DEFAULT_WHITE_LABEL,
    WhiteLabelSettings,
)
from finance_dashboard.domain.exceptions import (
    CollaboratorError,
    FetchFailedError,
    MutationFailedError,
)

logger = logging.getLogger(__name__)

_PATH = "whitelabel"


class WhiteLabelService:
    """Load, save and reset the tenant branding settings."""

    def __init__(self, gateway: CollaboratorGateway):
        self._gateway = gateway

    async def load(self) -> WhiteLabelSettings:
        try:
            data = await self._gateway.get(_PATH)
        except CollaboratorError as exc:
            logger.warning("Fetching white-label settings failed: %s", exc)
            raise FetchFailedError("whitelabel", "Failed to fetch white-label settings") from exc
        return WhiteLabelSettings.model_validate(data or {})

    async def save(self, settings: WhiteLabelSettings) -> WhiteLabelSettings:
        try:
            reply = await self._gateway.put(_PATH, settings.model_dump())
        except CollaboratorError as exc:
            logger.warning("Saving white-label settings failed: %s", exc)
            raise MutationFailedError("whitelabel", "update", "Failed to update settings") from exc
        logger.info("White-label settings updated")
        return WhiteLabelSettings.model_validate(reply) if reply else settings

    async def upload_logo(
        self, settings: WhiteLabelSettings, filename: str, content: bytes
    ) -> WhiteLabelSettings:
        """Upload a logo file and return the settings pointing at it."""
        try:
            reply = await self._gateway.upload(f"{_PATH}/logo", "logo", filename, content)
        except CollaboratorError as exc:
            logger.warning("Logo upload failed: %s", exc)
            raise MutationFailedError("whitelabel", "upload", "Failed to upload logo") from exc
        return settings.model_copy(update={"logo": reply.get("logoUrl", settings.logo)})

    @staticmethod
    def reset_to_defaults() -> WhiteLabelSettings:
        return DEFAULT_WHITE_LABEL.model_copy(deep=True)
