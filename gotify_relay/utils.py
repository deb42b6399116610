"""Utility functions for the gotify relay"""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from gotify_relay.constants import DISPLAY_TIME_FORMAT, DISPLAY_TIMEZONE

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the relay namespace"""
    return logging.getLogger(f"gotify_relay.{name}")


logger = get_logger("application")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root handler once at startup"""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def format_rfc3339(instant: datetime) -> str:
    """Format an instant as RFC 3339 with seconds precision, using Z for UTC"""
    text = instant.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def format_time(instant: datetime, tz_name: str = DISPLAY_TIMEZONE) -> str:
    """Format an instant in the display timezone as ``YYYY-MM-DD HH:mm:ss``.

    Args:
        instant: A timezone-aware instant
        tz_name: IANA name of the display timezone

    Returns:
        The formatted local time, or the RFC 3339 form of the instant when
        the timezone database has no entry for ``tz_name``.
    """
    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning("Error loading %s timezone: %s", tz_name, e)
        return format_rfc3339(instant)
    return instant.astimezone(zone).strftime(DISPLAY_TIME_FORMAT)
