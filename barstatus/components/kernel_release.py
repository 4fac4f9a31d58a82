"""Kernel release, as reported by uname -r."""

from __future__ import annotations

import os

from barstatus.util import warn


def kernel_release(unused: str | None = None) -> str | None:
    """Return the kernel release string."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None