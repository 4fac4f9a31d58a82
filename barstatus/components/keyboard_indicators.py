"""Caps lock and num lock indicators."""

from __future__ import annotations

from barstatus.util import warn
from barstatus.x11 import X11Error, open_display


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render indicators for fmt, e.g. 'c?n?', given the keyboard LED mask.

    A letter followed by '?' appears, case preserved, only while its LED is
    on; otherwise it always appears, uppercase when on and lowercase when off.
    """
    fmt = fmt[:4]
    out = []
    for pos, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        optional = pos + 1 < len(fmt) and fmt[pos + 1] == "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if not optional:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def keyboard_indicators(fmt: str) -> str | None:
    """Return the state of caps and num lock formatted by fmt."""
    try:
        with open_display() as display:
            mask = display.keyboard_led_mask()
    except X11Error:
        warn("XOpenDisplay: Failed to open display")
        return None
    return format_indicators(fmt, mask)