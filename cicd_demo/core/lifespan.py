from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cicd_demo.core.constants import APP_NAME

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the serving identity once the listener is up, and the shutdown."""
    settings = app.state.settings
    identity = app.state.identity
    logger.info(
        "Starting %s server v%s on port %s",
        APP_NAME,
        identity.version,
        settings.port,
        extra={"app_env": settings.app_env, "host": settings.host},
    )
    try:
        yield
    finally:
        logger.info("Stopping %s server", APP_NAME, extra={"uptime": identity.uptime()})
