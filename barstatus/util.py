"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

# Longest line a component may return, matching the status buffer size.
LINE_LIMIT = 1022

_UNSIGNED = re.compile(r"\s*(\d+)")


def warn(message: str) -> None:
    """Print a diagnostic to stderr.

    A message ending in ':' is followed by the text of the exception
    currently being handled, if there is one.
    """
    if message.endswith(":"):
        exc = sys.exc_info()[1]
        if isinstance(exc, OSError) and exc.strerror:
            detail = exc.strerror
        elif exc is not None:
            detail = str(exc)
        else:
            detail = ""
        print(f"{message} {detail}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


def die(message: str) -> None:
    """Print a diagnostic and exit with status 1."""
    warn(message)
    raise SystemExit(1)


def fmt_human(num: float, base: int) -> str:
    """Scale num by base and append the matching unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_int(path: str) -> int | None:
    """Read the leading unsigned integer of a file, or None if there is none."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            text = fh.read()
    except OSError:
        warn(f"fopen '{path}':")
        return None
    match = _UNSIGNED.match(text)
    return int(match.group(1)) if match else None


def read_line(path: str) -> str | None:
    """Return the first line of a file without its newline.

    Returns None if the file cannot be opened or is empty.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            line = fh.readline(LINE_LIMIT)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    if not line:
        return None
    return line.removesuffix("\n")


def parse_meminfo(text: str) -> dict[str, int]:
    """Parse lines of the form 'Key: value kB' into a mapping of key to value."""
    result: dict[str, int] = {}
    for line in text.splitlines():
        key, sep, rest = line.partition(":")
        if not sep:
            continue
        fields = rest.split()
        if fields and fields[0].isdigit():
            result[key.strip()] = int(fields[0])
    return result