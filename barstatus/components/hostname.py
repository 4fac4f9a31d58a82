"""Host name of the machine."""

from __future__ import annotations

import socket

from barstatus.util import warn


def hostname(unused: str | None = None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostname:")
        return None