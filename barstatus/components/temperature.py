"""Temperature from a thermal sensor file."""

from __future__ import annotations

from barstatus.util import read_int


def temp(file: str) -> str | None:
    """Return the temperature in whole degrees Celsius from a millidegree file."""
    value = read_int(file)
    return None if value is None else str(value // 1000)