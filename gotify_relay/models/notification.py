"""Models for outbound notifications"""

from pydantic import BaseModel, ConfigDict


class NotificationPayload(BaseModel):
    """Message body accepted by the Gotify message endpoint"""

    model_config = ConfigDict(frozen=True)

    title: str
    message: str
    priority: int
