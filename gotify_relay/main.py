"""Manage the API entrypoints"""

import sys

import uvicorn
from fastapi import FastAPI

from gotify_relay.config import RelayConfig, read_config
from gotify_relay.exceptions import StartupConfigError
from gotify_relay.utils import get_logger, setup_logging

from .routes.v1.health import router as health_router
from .routes.v1.webhook import router as webhook_router

logger = get_logger("application")


def create_app(config: RelayConfig) -> FastAPI:
    """Create the relay application bound to a configuration"""
    app = FastAPI(title="gotify-relay")
    app.state.config = config
    app.include_router(webhook_router)
    app.include_router(health_router)
    return app


def run() -> None:
    """Read the configuration, then serve until interrupted"""
    setup_logging()
    try:
        config = read_config()
    except StartupConfigError as e:
        logger.critical("%s", e.message)
        sys.exit(1)

    setup_logging(config.log_level)
    logger.info("Starting server on %s:%d...", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
