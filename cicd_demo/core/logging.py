from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

# Attributes every LogRecord carries; anything else on a record came from `extra` or the log context.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime", "taskName"}

# Request-scoped fields (request_id, method, path) survive awaits and threadpool hops.
_LOG_CONTEXT: ContextVar[dict[str, Any] | None] = ContextVar("log_context", default=None)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER_PREFIX = "cicd_demo"

# uvicorn.error carries the "Uvicorn running on ..." and shutdown lines, so it stays at INFO.
THIRD_PARTY_LEVELS: dict[str, int] = {
    "uvicorn": logging.WARNING,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "asyncio": logging.WARNING,
}


def _matches(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(prefix + ".")


class RequestContextFilter(logging.Filter):
    """Copies the active log_context() fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in (_LOG_CONTEXT.get() or {}).items():
            if key not in _RECORD_ATTRS:
                setattr(record, key, value)
        return True


class AppLoggingFilter(logging.Filter):
    """Let app records through at the configured level, hold third-party loggers to their table level."""

    def __init__(self, *, app_prefix: str, third_party_levels: Mapping[str, int]) -> None:
        super().__init__()
        self.app_prefix = app_prefix
        self.third_party_levels = dict(third_party_levels)

    def is_app_logger(self, name: str) -> bool:
        return name == "__main__" or _matches(name, self.app_prefix)

    def threshold_for(self, name: str) -> int:
        # Longest matching prefix wins; unknown libraries get WARNING.
        matching = [prefix for prefix in self.third_party_levels if _matches(name, prefix)]
        if not matching:
            return logging.WARNING
        return self.third_party_levels[max(matching, key=len)]

    def filter(self, record: logging.LogRecord) -> bool:
        if self.is_app_logger(record.name):
            return True
        return record.levelno >= self.threshold_for(record.name)


class KeyValueFormatter(logging.Formatter):
    """Renders extra fields after the message as [key=value ...]."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = [f"{key}={value}" for key, value in vars(record).items() if key not in _RECORD_ATTRS]
        return f"{line} [{' '.join(extras)}]" if extras else line


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Temporarily attach context fields to all log lines in this scope."""

    token = _LOG_CONTEXT.set({**(_LOG_CONTEXT.get() or {}), **kwargs})
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def get_log_context() -> Mapping[str, Any]:
    return _LOG_CONTEXT.get() or {}


def resolve_level(name: str | None, fallback: int = logging.INFO) -> int:
    level = logging.getLevelName(name.strip().upper()) if name else fallback
    return level if isinstance(level, int) else fallback


def setup_logging(*, log_level: str | None = None) -> None:
    """
    Configure global, context-aware logging for the application.

    The level comes from `log_level`, then the LOG_LEVEL env var, then INFO.
    Safe to call more than once; existing root handlers are replaced.
    """
    root_level = resolve_level(log_level or os.getenv("LOG_LEVEL"))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    logging.captureWarnings(True)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(KeyValueFormatter(LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    handler.addFilter(RequestContextFilter())
    handler.addFilter(AppLoggingFilter(app_prefix=APP_LOGGER_PREFIX, third_party_levels=THIRD_PARTY_LEVELS))

    root_logger.addHandler(handler)
    root_logger.setLevel(root_level)

    # uvicorn installs its own handlers unless told otherwise; route everything through root.
    for name, level in THIRD_PARTY_LEVELS.items():
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.propagate = True
        logger.setLevel(level)
    logging.getLogger(APP_LOGGER_PREFIX).setLevel(root_level)

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"log_level": logging.getLevelName(root_level)},
    )
