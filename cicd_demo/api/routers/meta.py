from __future__ import annotations

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from cicd_demo.api.deps.identity import get_process_identity
from cicd_demo.application.meta import app_info, health_status, home_page_context, readiness_status
from cicd_demo.core.identity import ProcessIdentity
from cicd_demo.schemas.meta import HealthResponse, InfoResponse, ReadyResponse

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["meta"])


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    identity: Annotated[ProcessIdentity, Depends(get_process_identity)],
) -> HTMLResponse:
    return templates.TemplateResponse(request, "home.html", home_page_context(identity))


@router.get("/health", response_model=HealthResponse)
def health(identity: Annotated[ProcessIdentity, Depends(get_process_identity)]) -> HealthResponse:
    return health_status(identity)


@router.get("/ready", response_model=ReadyResponse)
def ready() -> ReadyResponse:
    return readiness_status()


@router.get("/info", response_model=InfoResponse)
def info(identity: Annotated[ProcessIdentity, Depends(get_process_identity)]) -> InfoResponse:
    return app_info(identity)
