from __future__ import annotations

import logging

import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from cicd_demo.api.app import create_app
from cicd_demo.core.config import Settings
from cicd_demo.core.identity import ProcessIdentity


def test_request_id_is_echoed(client: TestClient) -> None:
    resp = client.get("/ready", headers={"X-Request-Id": "abc123"})

    assert resp.headers["X-Request-Id"] == "abc123"


def test_request_id_is_generated(client: TestClient) -> None:
    first = client.get("/ready").headers["X-Request-Id"]
    second = client.get("/ready").headers["X-Request-Id"]

    assert len(first) == 32
    assert first != second


def test_access_line_per_request(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    client.get("/ready")
    client.get("/missing")

    lines = [record.getMessage() for record in caplog.records if record.name == "cicd_demo.access"]
    assert len(lines) == 2
    assert lines[0].startswith("GET /ready 200 ")
    assert lines[0].endswith("ms")
    assert lines[1].startswith("GET /missing 404 ")


def test_startup_and_shutdown_are_logged(
    settings: Settings, identity: ProcessIdentity, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)

    with TestClient(create_app(settings, identity)):
        pass

    messages = [record.getMessage() for record in caplog.records if record.name == "cicd_demo.core.lifespan"]
    assert messages == [
        "Starting ci-cd-demo server v1.2.3 on port 8080",
        "Stopping ci-cd-demo server",
    ]


def test_request_id_is_not_stashed_on_request_state(settings: Settings, identity: ProcessIdentity) -> None:
    app = create_app(settings, identity)

    @app.get("/state")
    def state(request: Request) -> dict[str, bool]:
        return {"has_request_id": hasattr(request.state, "request_id")}

    with TestClient(app) as client:
        resp = client.get("/state", headers={"X-Request-Id": "abc"})

    assert resp.json() == {"has_request_id": False}
    assert resp.headers["X-Request-Id"] == "abc"
