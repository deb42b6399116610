"""Service for sending notifications to Gotify"""

from typing import Annotated

import httpx
from fastapi import Depends

from gotify_relay.config import RelayConfig
from gotify_relay.constants import GOTIFY_KEY_HEADER
from gotify_relay.dependencies import get_relay_config
from gotify_relay.exceptions import DeliveryError
from gotify_relay.models.notification import NotificationPayload
from gotify_relay.utils import get_logger

logger = get_logger("gotify_service")


class GotifyService:
    """Service for sending notifications to Gotify"""

    def __init__(self, config: RelayConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize Gotify service

        Args:
            config: Relay configuration holding the Gotify endpoint and token
            transport: Optional httpx transport, used to stub Gotify out
        """
        self.config = config
        self.transport = transport

    def build_payload(self, message: str) -> NotificationPayload:
        """Wrap a rendered message with the configured title and priority"""
        return NotificationPayload(title=self.config.title, message=message, priority=self.config.priority)

    async def send(self, payload: NotificationPayload) -> None:
        """Send one notification to Gotify

        Args:
            payload: The notification to deliver

        Raises:
            DeliveryError: If the request fails or Gotify does not answer 200
        """
        headers = {"Content-Type": "application/json", GOTIFY_KEY_HEADER: self.config.gotify_token}
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.config.gotify_url, content=payload.model_dump_json(), headers=headers
                )
        except httpx.HTTPError as exc:
            logger.error("Error making request to Gotify: %s", str(exc))
            raise DeliveryError(f"Failed to connect to Gotify: {exc!s}") from exc

        if response.status_code != httpx.codes.OK:
            logger.error("Gotify returned non-200 status: %s %s", response.status_code, response.reason_phrase)
            raise DeliveryError(
                f"Gotify returned non-200 status: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        logger.debug("Gotify accepted message titled %r", payload.title)


def get_gotify_service(config: Annotated[RelayConfig, Depends(get_relay_config)]) -> GotifyService:
    """Get Gotify service instance"""
    return GotifyService(config)
