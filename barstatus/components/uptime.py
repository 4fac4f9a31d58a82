"""Time since the system booted."""

from __future__ import annotations

import time

from barstatus.util import warn

_CLOCK = getattr(
    time, "CLOCK_BOOTTIME", getattr(time, "CLOCK_UPTIME", time.CLOCK_MONOTONIC)
)


def format_uptime(seconds: float) -> str:
    """Format a number of seconds as hours and minutes."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    return f"{hours}h {rest // 60}m"


def uptime(unused: str | None = None) -> str | None:
    """Return the system uptime."""
    try:
        seconds = time.clock_gettime(_CLOCK)
    except OSError:
        warn(f"clock_gettime {_CLOCK}")
        return None
    return format_uptime(seconds)