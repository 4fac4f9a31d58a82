"""Current keyboard layout."""

from __future__ import annotations

import re

from barstatus.util import warn
from barstatus.x11 import X11Error, open_display

_INVALID = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:_]")


def _valid(token: str) -> bool:
    return not token.startswith(_INVALID)


def get_layout(symbols: str, group: int) -> str | None:
    """Pick the layout for group out of an XKB symbols name."""
    layout = None
    found = 0
    for token in filter(None, _SEPARATORS.split(symbols)):
        if found > group:
            break
        if not _valid(token):
            continue
        if len(token) == 1 and token.isdigit():
            continue
        layout = token
        found += 1
    return layout


def keymap(unused: str | None = None) -> str | None:
    """Return the layout (with variant) of the active keyboard group."""
    try:
        display = open_display()
    except X11Error:
        warn("XOpenDisplay: Failed to open display")
        return None
    try:
        symbols, group = display.keyboard_symbols()
    except X11Error:
        warn("XkbGetNames: Failed to retrieve key symbols")
        return None
    finally:
        display.close()
    return get_layout(symbols, group)