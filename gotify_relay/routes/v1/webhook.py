"""Alertmanager webhook receiver"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from gotify_relay.exceptions import DecodeError, RenderError
from gotify_relay.models.alerts import AlertWebhookPayload
from gotify_relay.routes.error_handling import handle_relay_exception
from gotify_relay.services import GotifyService, get_gotify_service, render_alerts
from gotify_relay.utils import get_logger

logger = get_logger("application")
router = APIRouter(tags=["webhook"])


def decode_payload(body: bytes) -> AlertWebhookPayload:
    """Decode an Alertmanager webhook body

    Raises:
        DecodeError: If the body is not JSON or does not have the expected shape
    """
    try:
        return AlertWebhookPayload.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Failed to decode JSON payload: {e.error_count()} error(s)") from e


@router.post(
    "/webhook",
    summary="Relay an Alertmanager alert batch to Gotify",
    response_description="Empty body when the alert was delivered",
)
async def receive_alerts(
    request: Request,
    gotify_service: Annotated[GotifyService, Depends(get_gotify_service)],
) -> Response:
    """Render the alert batch into one message and send it to Gotify"""
    try:
        payload = decode_payload(await request.body())
        logger.info("Received %d alert(s)", len(payload.alerts))

        try:
            message = render_alerts(payload.alerts)
        except Exception as e:
            raise RenderError(f"Failed to render template: {e!s}") from e

        await gotify_service.send(gotify_service.build_payload(message))
    except Exception as e:
        return handle_relay_exception(e, "alert relay")

    logger.info("Alert sent to Gotify successfully")
    return Response(status_code=status.HTTP_200_OK)
