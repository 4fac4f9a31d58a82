"""Battery charge, charging state and remaining time from the power supply class."""

from __future__ import annotations

import os
import re

from barstatus.util import read_int, read_line

POWER_SUPPLY_ROOT = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATE_PATTERN = re.compile(r"[A-Za-z ]{1,12}")


def _supply_file(root: str, bat: str, name: str) -> str:
    return os.path.join(root, bat, name)


def _read_state(bat: str, root: str) -> str | None:
    line = read_line(_supply_file(root, bat, "status"))
    if line is None:
        return None
    match = _STATE_PATTERN.match(line)
    return match.group(0) if match else None


def _pick(bat: str, root: str, *names: str) -> str | None:
    """Return the first readable file among names for the battery."""
    for name in names:
        path = _supply_file(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return the battery capacity in percent."""
    capacity = read_int(_supply_file(root, bat, "capacity"))
    return None if capacity is None else str(capacity)


def battery_state(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, else '?'."""
    state = _read_state(bat, root)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return the time left while discharging, or an empty string otherwise."""
    state = _read_state(bat, root)
    if state is None:
        return None

    charge_path = _pick(bat, root, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, root, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"