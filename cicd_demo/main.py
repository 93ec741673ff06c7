"""Process entrypoint: load settings, bind the port, serve."""

from __future__ import annotations

import logging
import socket

import uvicorn
from fastapi import FastAPI

from cicd_demo.api.app import create_app
from cicd_demo.core.config import Settings, get_settings
from cicd_demo.core.errors import AppError, ServerStartupError
from cicd_demo.core.logging import setup_logging

logger = logging.getLogger("cicd_demo.main")


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind the listen socket up front so a taken port fails before serving starts."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise ServerStartupError(f"cannot bind {host}:{port}: {exc.strerror or exc}") from exc
    sock.set_inheritable(True)
    return sock


def serve(app: FastAPI, settings: Settings) -> None:
    sock = bind_socket(settings.host, settings.port)
    # log_config=None keeps uvicorn on the handlers installed by setup_logging.
    config = uvicorn.Config(app, log_config=None, access_log=False)
    server = uvicorn.Server(config)
    server.run(sockets=[sock])


def main() -> None:
    setup_logging()
    try:
        settings = get_settings()
        serve(create_app(settings), settings)
    except AppError as exc:
        logger.critical("Server failed to start: %s", exc.detail, extra={"error_code": exc.code})
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
