from __future__ import annotations

import logging
from typing import Any

from cicd_demo.core.constants import (
    APP_DESCRIPTION,
    APP_NAME,
    EVENT_NAME,
    HEALTH_STATUS_OK,
    READY_STATUS,
    TAGLINE,
)
from cicd_demo.core.identity import ProcessIdentity
from cicd_demo.schemas.meta import HealthResponse, InfoResponse, ReadyResponse

logger = logging.getLogger(__name__)

ENDPOINTS: tuple[tuple[str, str], ...] = (
    ("GET /", "This page"),
    ("GET /health", "Liveness probe"),
    ("GET /ready", "Readiness probe"),
    ("GET /info", "Application info"),
)


def home_page_context(identity: ProcessIdentity) -> dict[str, Any]:
    return {
        "event": EVENT_NAME,
        "tagline": TAGLINE,
        "version": identity.version,
        "endpoints": ENDPOINTS,
    }


def health_status(identity: ProcessIdentity) -> HealthResponse:
    uptime = identity.uptime()
    # Probes hit this every few seconds; keep it out of INFO.
    logger.debug("health check ok", extra={"uptime": uptime})
    return HealthResponse(status=HEALTH_STATUS_OK, version=identity.version, uptime=uptime)


def readiness_status() -> ReadyResponse:
    # No dependencies to check: the process is ready as soon as it serves requests.
    logger.debug("readiness check ok")
    return ReadyResponse(status=READY_STATUS)


def app_info(identity: ProcessIdentity) -> InfoResponse:
    return InfoResponse(
        app=APP_NAME,
        version=identity.version,
        description=APP_DESCRIPTION,
        event=EVENT_NAME,
    )
