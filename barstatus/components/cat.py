"""Show the first line of an arbitrary file."""

from __future__ import annotations

from barstatus.util import read_line


def cat(path: str) -> str | None:
    """Return the first line of path, or None if it is missing or empty."""
    return read_line(path) or None