"""Dependencies for the gotify relay"""
from fastapi import Request

from gotify_relay.config import RelayConfig


def get_relay_config(request: Request) -> RelayConfig:
    """Get the relay configuration the application was created with"""
    return request.app.state.config
