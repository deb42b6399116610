"""Render an alert batch into a single Gotify message"""

from collections.abc import Iterable

from gotify_relay.constants import (
    ALERT_NAME_LABEL,
    DESCRIPTION_LABEL,
    END_TIME_LABEL,
    FIRING_MARKER,
    INSTANCE_LABEL,
    IP_LABEL,
    RESOLVED_MARKER,
    START_TIME_LABEL,
)
from gotify_relay.models.alerts import Alert
from gotify_relay.utils import format_time


def render_alert(alert: Alert) -> str:
    """Render one alert as a block of newline terminated lines.

    A firing alert shows its start time in the end time field as well.
    Consumers of the existing message format rely on this, so it is kept.
    """
    if alert.is_firing:
        marker = FIRING_MARKER
        end_time = format_time(alert.starts_at)
    else:
        marker = RESOLVED_MARKER
        end_time = format_time(alert.ends_at)

    lines = [
        marker,
        f"{ALERT_NAME_LABEL}: {alert.labels.get('alertname', '')}",
        f"{START_TIME_LABEL}: {format_time(alert.starts_at)}",
        f"{END_TIME_LABEL}: {end_time}",
        f"{INSTANCE_LABEL}: {alert.labels.get('instance', '')}",
        f"{IP_LABEL}: {alert.annotations.get('ip', '')}",
        f"{DESCRIPTION_LABEL}: {alert.annotations.get('description', '')}",
    ]
    return "".join(f"{line}\n" for line in lines)


def render_alerts(alerts: Iterable[Alert]) -> str:
    """Render every alert in order into one message

    Args:
        alerts: Alerts in the order they were received

    Returns:
        str: the message text, ``"\\n\\n"`` for an empty batch
    """
    blocks = [f" \n{render_alert(alert)}\n" for alert in alerts]
    return "\n" + "".join(blocks) + "\n"
