"""Default configuration: update interval, placeholder text and components."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from barstatus.components.dates import datetime

INTERVAL = 1000  # milliseconds between updates
UNKNOWN_STR = "n/a"
MAXLEN = 2048


@dataclass(frozen=True)
class Arg:
    """One status item: a component, a printf-style format and its argument."""

    func: Callable[[str | None], str | None]
    fmt: str
    argument: str | None = None


def default_args() -> list[Arg]:
    """Return the default list of status items."""
    return [Arg(datetime, "%s", "%F %T")]