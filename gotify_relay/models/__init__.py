"""model init"""

from .alerts import Alert, AlertWebhookPayload
from .notification import NotificationPayload

__all__ = [
    "Alert",
    "AlertWebhookPayload",
    "NotificationPayload",
]
