"""Read-only process identity shared by all request handlers."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from cicd_demo.core.constants import DEFAULT_VERSION

Clock = Callable[[], float]


def format_duration(seconds: int) -> str:
    """
    Render whole seconds in compact h/m/s notation.

    0 -> "0s", 61 -> "1m1s", 10921 -> "3h2m1s". Smaller units are always
    printed once a larger unit is present.
    """
    if seconds < 0:
        raise ValueError("duration must be non-negative")

    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


@dataclass(frozen=True)
class ProcessIdentity:
    """Version and start time, captured once and never mutated."""

    version: str = DEFAULT_VERSION
    clock: Clock = field(default=time.monotonic, repr=False, compare=False)
    started_at: float = field(init=False)

    def __post_init__(self) -> None:
        if not self.version:
            object.__setattr__(self, "version", DEFAULT_VERSION)
        object.__setattr__(self, "started_at", self.clock())

    def uptime_seconds(self) -> int:
        elapsed = max(self.clock() - self.started_at, 0.0)
        # Half-up rounding to the nearest second.
        return int(elapsed + 0.5)

    def uptime(self) -> str:
        return format_duration(self.uptime_seconds())
