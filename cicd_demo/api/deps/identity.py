from __future__ import annotations

from fastapi import Request

from cicd_demo.core.identity import ProcessIdentity


def get_process_identity(request: Request) -> ProcessIdentity:
    """Return the identity built by the application factory."""
    return request.app.state.identity
