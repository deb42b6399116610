"""Process configuration read from the environment"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from gotify_relay.constants import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT, DEFAULT_PRIORITY, DEFAULT_TITLE
from gotify_relay.exceptions import StartupConfigError

ENV_VARS = {
    "gotify_url": "GOTIFY_URL",
    "gotify_token": "GOTIFY_TOKEN",
    "title": "GOTIFY_TITLE",
    "priority": "GOTIFY_PRIORITY",
    "host": "RELAY_HOST",
    "port": "RELAY_PORT",
    "log_level": "RELAY_LOG_LEVEL",
}

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class RelayConfig(BaseModel):
    """Configuration for the relay, fixed for the lifetime of the process"""

    model_config = ConfigDict(frozen=True)

    gotify_url: str
    gotify_token: str
    title: str = DEFAULT_TITLE
    priority: int = DEFAULT_PRIORITY
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        """Accept only the standard logging level names"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v}")
        return level


def read_config(environ: Mapping[str, str] | None = None) -> RelayConfig:
    """Build the relay configuration from environment variables

    Args:
        environ: Mapping to read from, defaults to ``os.environ``

    Returns:
        RelayConfig: the validated configuration

    Raises:
        StartupConfigError: If a required variable is missing or a value is invalid
    """
    environ = os.environ if environ is None else environ
    values = {field: environ[var] for field, var in ENV_VARS.items() if environ.get(var)}

    missing = [ENV_VARS[field] for field in ("gotify_url", "gotify_token") if field not in values]
    if missing:
        raise StartupConfigError(f"{' and '.join(missing)} must be set in environment variables")

    try:
        return RelayConfig(**values)
    except ValidationError as e:
        fields = ", ".join(ENV_VARS[str(err["loc"][0])] for err in e.errors())
        raise StartupConfigError(f"Invalid value for {fields}") from e
