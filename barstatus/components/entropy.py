"""Available kernel entropy."""

from __future__ import annotations

import sys

from barstatus.util import read_int

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"
INFINITY = "\u221e"


def entropy(unused: str | None = None, path: str = ENTROPY_AVAIL) -> str | None:
    """Return the available entropy; BSD systems always report infinity."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return INFINITY
    value = read_int(path)
    return None if value is None else str(value)