"""Swap usage from /proc/meminfo."""

from __future__ import annotations

from barstatus.util import fmt_human, parse_meminfo, warn

MEMINFO = "/proc/meminfo"


def _swap_info(path: str) -> tuple[int, int, int] | None:
    """Return swap total, free and cached in kB."""
    try:
        with open(path, encoding="utf-8") as fh:
            info = parse_meminfo(fh.read())
    except OSError:
        warn(f"fopen '{path}':")
        return None
    try:
        return info["SwapTotal"], info["SwapFree"], info["SwapCached"]
    except KeyError:
        return None


def swap_free(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Return free swap space."""
    info = _swap_info(path)
    return None if info is None else fmt_human(info[1] * 1024, 1024)


def swap_perc(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Return swap usage in percent."""
    info = _swap_info(path)
    if info is None:
        return None
    total, free, cached = info
    if total == 0:
        return None
    return str(100 * (total - free - cached) // total)


def swap_total(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Return total swap space."""
    info = _swap_info(path)
    return None if info is None else fmt_human(info[0] * 1024, 1024)


def swap_used(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Return swap space in use."""
    info = _swap_info(path)
    if info is None:
        return None
    total, free, cached = info
    return fmt_human((total - free - cached) * 1024, 1024)