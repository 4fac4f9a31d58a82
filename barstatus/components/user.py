"""Identity of the current user."""

from __future__ import annotations

import os
import pwd

from barstatus.util import warn


def gid(unused: str | None = None) -> str:
    """Return the real group id."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Return the effective user id."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None