"""Services for the gotify relay"""

from .gotify_service import GotifyService, get_gotify_service
from .render_service import render_alert, render_alerts

__all__ = [
    "GotifyService",
    "get_gotify_service",
    "render_alert",
    "render_alerts",
]
