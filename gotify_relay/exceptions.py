"""exceptions"""

from gotify_relay.constants import DECODE_ERROR, DELIVERY_ERROR, RELAY_ERROR, RENDER_ERROR, STARTUP_CONFIG_ERROR


class RelayError(Exception):
    """Base exception for all relay errors"""

    def __init__(self, message: str | None = None, code: int = RELAY_ERROR) -> None:
        self.code = code
        self.message = message or "Relay operation failed"
        super().__init__(self.message)


class DecodeError(RelayError):
    """Exception for inbound payloads that cannot be decoded"""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Failed to decode JSON payload", DECODE_ERROR)


class RenderError(RelayError):
    """Exception for failures while rendering the alert message"""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Failed to render template", RENDER_ERROR)


class DeliveryError(RelayError):
    """Exception for failures while sending a notification to Gotify"""

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        status_msg = f" (status {status_code})" if status_code is not None else ""
        message = message or f"Gotify delivery failed{status_msg}"
        super().__init__(message, DELIVERY_ERROR)
        self.status_code = status_code


class StartupConfigError(RelayError):
    """Exception for missing or invalid configuration at startup"""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Invalid relay configuration", STARTUP_CONFIG_ERROR)
