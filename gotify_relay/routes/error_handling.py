"""Error handling for the gotify relay"""

from fastapi import status
from fastapi.responses import PlainTextResponse

from gotify_relay.exceptions import DecodeError, DeliveryError, RelayError, RenderError
from gotify_relay.utils import get_logger

logger = get_logger("application")


def handle_relay_exception(e: Exception, operation: str) -> PlainTextResponse:
    """Handle relay exceptions and return a plain text error response

    Args:
        e: The exception to handle
        operation: Description of the operation being performed

    Returns:
        PlainTextResponse with the matching status and a short description
    """
    if isinstance(e, DecodeError):
        logger.warning("Error decoding JSON during %s: %s", operation, str(e))
        return PlainTextResponse(e.message, status_code=status.HTTP_400_BAD_REQUEST)
    if isinstance(e, RenderError):
        logger.error("Error rendering template during %s: %s", operation, str(e))
        return PlainTextResponse(e.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(e, DeliveryError):
        logger.error("Error sending to Gotify during %s: %s", operation, str(e))
        return PlainTextResponse("Failed to send alert to Gotify", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(e, RelayError):
        logger.error("Relay error during %s: %s", operation, str(e))
        return PlainTextResponse(e.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.exception("Unexpected error during %s", operation)
    return PlainTextResponse(f"Unexpected error during {operation}", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
