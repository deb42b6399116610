"""Models for alerts"""

from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator

from gotify_relay.constants import FIRING_STATUS


class Alert(BaseModel):
    """Alert model"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: str
    labels: dict[str, str] = {}
    annotations: dict[str, str] = {}
    starts_at: AwareDatetime = Field(alias="startsAt")
    ends_at: AwareDatetime = Field(alias="endsAt")

    @field_validator("labels", "annotations", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:  # noqa: ANN401
        """Treat a JSON null mapping as empty"""
        return {} if v is None else v

    @property
    def is_firing(self) -> bool:
        """Only the exact "firing" status counts as firing"""
        return self.status == FIRING_STATUS


class AlertWebhookPayload(BaseModel):
    """Payload for the alert webhook"""

    model_config = ConfigDict(frozen=True)

    alerts: list[Alert] = []

    @field_validator("alerts", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:  # noqa: ANN401
        """Treat a JSON null list as empty"""
        return [] if v is None else v
