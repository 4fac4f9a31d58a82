"""Addresses and link state of network interfaces."""

from __future__ import annotations

import socket

import psutil

from barstatus.util import warn


def _interface_addresses() -> dict | None:
    try:
        return psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None


def _address(interface: str, family: int) -> str | None:
    addresses = _interface_addresses()
    if addresses is None:
        return None
    for entry in addresses.get(interface, ()):
        if entry.family == family:
            return entry.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of an interface."""
    return _address(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of an interface."""
    return _address(interface, socket.AF_INET6)


def up(interface: str) -> str | None:
    """Return 'up' or 'down' for an interface that has an address."""
    addresses = _interface_addresses()
    if addresses is None or not addresses.get(interface):
        return None
    try:
        stats = psutil.net_if_stats()
    except OSError:
        warn("getifaddrs:")
        return None
    entry = stats.get(interface)
    if entry is None:
        return None
    return "up" if entry.isup else "down"