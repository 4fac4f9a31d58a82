"""Memory usage from /proc/meminfo."""

from __future__ import annotations

from barstatus.util import fmt_human, parse_meminfo, warn

MEMINFO = "/proc/meminfo"

_USAGE_KEYS = ("MemTotal", "MemFree", "Buffers", "Cached", "Shmem", "SReclaimable")


def _meminfo(path: str, *keys: str) -> tuple[int, ...] | None:
    try:
        with open(path, encoding="utf-8") as fh:
            info = parse_meminfo(fh.read())
    except OSError:
        warn(f"fopen '{path}':")
        return None
    try:
        return tuple(info[key] for key in keys)
    except KeyError:
        return None


def _used_and_total(path: str) -> tuple[int, int] | None:
    values = _meminfo(path, *_USAGE_KEYS)
    if values is None:
        return None
    total, free, buffers, cached, shmem, sreclaimable = values
    return total - free - buffers - cached - sreclaimable + shmem, total


def ram_free(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Return free memory."""
    values = _meminfo(path, "MemFree")
    return None if values is None else fmt_human(values[0] * 1024, 1024)


def ram_perc(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Return memory usage in percent."""
    result = _used_and_total(path)
    if result is None:
        return None
    used, total = result
    if total == 0:
        return None
    return str(100 * used // total)


def ram_total(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Return total memory."""
    values = _meminfo(path, "MemTotal")
    return None if values is None else fmt_human(values[0] * 1024, 1024)


def ram_used(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Return memory in use."""
    result = _used_and_total(path)
    if result is None:
        return None
    return fmt_human(result[0] * 1024, 1024)