from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime: str


class ReadyResponse(BaseModel):
    status: str


class InfoResponse(BaseModel):
    app: str
    version: str
    description: str
    event: str
