from __future__ import annotations

from fastapi import FastAPI

from cicd_demo import __version__
from cicd_demo.api.routers import meta_router
from cicd_demo.core.config import Settings, get_settings
from cicd_demo.core.constants import APP_DESCRIPTION, APP_NAME
from cicd_demo.core.identity import ProcessIdentity
from cicd_demo.core.lifespan import lifespan
from cicd_demo.core.middleware import log_requests


def create_app(settings: Settings | None = None, identity: ProcessIdentity | None = None) -> FastAPI:
    """
    Application factory for creating FastAPI instances.

    Args:
        settings: Optional settings override. If None, loads from environment.
        identity: Optional process identity. If None, one is created from
                  settings.app_version with the start time taken now.
                  Tests pass one with a controllable clock.
    """
    if settings is None:
        settings = get_settings()
    if identity is None:
        identity = ProcessIdentity(version=settings.app_version)

    app = FastAPI(
        title=APP_NAME,
        description=APP_DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
    )
    app.include_router(meta_router)
    app.state.settings = settings
    app.state.identity = identity

    app.middleware("http")(log_requests)

    return app
