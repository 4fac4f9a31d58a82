"""Receive and transmit speed of a network interface."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

import psutil

from barstatus.util import fmt_human, read_int, warn

NET_ROOT = "/sys/class/net"
DEFAULT_INTERVAL = 1000  # milliseconds between updates


@dataclass
class ByteRate:
    """Turns successive cumulative byte counters into bytes per second."""

    previous: int = 0

    def update(self, count: int, interval: int) -> int | None:
        """Record a counter and return the rate over interval milliseconds."""
        previous, self.previous = self.previous, count
        if previous == 0:
            return None
        delta = count - previous
        if delta < 0:
            return None
        return delta * 1000 // interval


_rates: dict[tuple[str, str, str], ByteRate] = {}


def _read_counter(interface: str, root: str, direction: str) -> int | None:
    if sys.platform.startswith("linux"):
        path = os.path.join(root, interface, "statistics", f"{direction}_bytes")
        return read_int(path)
    try:
        counters = psutil.net_io_counters(pernic=True).get(interface)
    except OSError:
        counters = None
    if counters is None:
        warn("reading 'if_data' failed")
        return None
    return counters.bytes_recv if direction == "rx" else counters.bytes_sent


def _netspeed(interface: str, root: str, direction: str) -> str | None:
    count = _read_counter(interface, root, direction)
    if count is None:
        return None
    tracker = _rates.setdefault((root, interface, direction), ByteRate())
    rate = tracker.update(count, DEFAULT_INTERVAL)
    return None if rate is None else fmt_human(rate, 1024)


def netspeed_rx(interface: str, root: str = NET_ROOT) -> str | None:
    """Return the receive speed of an interface since the previous call."""
    return _netspeed(interface, root, "rx")


def netspeed_tx(interface: str, root: str = NET_ROOT) -> str | None:
    """Return the transmit speed of an interface since the previous call."""
    return _netspeed(interface, root, "tx")