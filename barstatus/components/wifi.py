"""WiFi network name and signal strength via nl80211 generic netlink."""

from __future__ import annotations

import socket
import struct
import sys

from barstatus.util import warn

NLMSG_HDRLEN = 16
GENL_HDRLEN = 4
NLA_HDRLEN = 4

NETLINK_GENERIC = 16
GENL_ID_CTRL = 0x10
NLM_F_REQUEST = 0x1
NLM_F_DUMP = 0x300
NLMSG_DONE = 0x3

CTRL_CMD_GETFAMILY = 3
CTRL_ATTR_FAMILY_ID = 1
CTRL_ATTR_FAMILY_NAME = 2

NL80211_CMD_GET_INTERFACE = 5
NL80211_CMD_GET_STATION = 17
NL80211_ATTR_IFINDEX = 3
NL80211_ATTR_STA_INFO = 21
NL80211_ATTR_SSID = 52
NL80211_STA_INFO_SIGNAL_AVG = 13

_FAMILY_NAME = b"nl80211\0"
_RESPONSE_SIZE = 4096

_NLMSG_HDR = struct.Struct("=IHHII")
_GENL_HDR = struct.Struct("=BBH")
_NLA_HDR = struct.Struct("=HH")


def rssi_to_perc(rssi: int) -> int:
    """Map a signal level in dBm to a percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def _align(length: int) -> int:
    return (length + 3) & ~3


def find_attr(attr: int, data: bytes) -> bytes | None:
    """Return the payload of the first netlink attribute of type attr in data."""
    offset = 0
    while offset + NLA_HDRLEN <= len(data):
        length, kind = _NLA_HDR.unpack_from(data, offset)
        if length < NLA_HDRLEN:
            return None
        if kind == attr:
            return bytes(data[offset + NLA_HDRLEN : offset + length])
        offset += _align(length)
    return None


def _message(
    msg_type: int, flags: int, seq: int, cmd: int, attr_type: int, payload: bytes
) -> bytes:
    attr = _NLA_HDR.pack(NLA_HDRLEN + len(payload), attr_type) + payload
    attr += b"\0" * (_align(len(attr)) - len(attr))
    body = _GENL_HDR.pack(cmd, 1, 0) + attr
    return _NLMSG_HDR.pack(NLMSG_HDRLEN + len(body), msg_type, flags, seq, 0) + body


def _scan_dump(data: bytes, strength: str | None) -> tuple[str | None, bool]:
    """Look for a station's average signal in one buffer of dump replies.

    Returns the strength found so far and whether the dump is complete.
    """
    offset = 0
    while len(data) - offset >= NLMSG_HDRLEN:
        length, msg_type, _flags, _seq, _pid = _NLMSG_HDR.unpack_from(data, offset)
        if length < NLMSG_HDRLEN:
            return strength, True
        end = min(offset + length, len(data))
        if strength is None and length > NLMSG_HDRLEN + GENL_HDRLEN:
            attrs = data[offset + NLMSG_HDRLEN + GENL_HDRLEN : end]
            station = find_attr(NL80211_ATTR_STA_INFO, attrs)
            signal = (
                find_attr(NL80211_STA_INFO_SIGNAL_AVG, station)
                if station is not None
                else None
            )
            if signal is not None and len(signal) == 1:
                (rssi,) = struct.unpack("b", signal)
                strength = str(rssi_to_perc(rssi))
        if msg_type == NLMSG_DONE:
            return strength, True
        offset = end
    return strength, False


class _Nl80211:
    """A generic netlink socket bound to the nl80211 family."""

    def __init__(self) -> None:
        self.sock: socket.socket | None = None
        self.family_id = 0
        self._seq = 1

    def next_seq(self) -> int:
        seq = self._seq
        self._seq += 1
        return seq

    def send(self, request: bytes) -> bool:
        assert self.sock is not None
        try:
            sent = self.sock.send(request)
        except OSError:
            warn("send 'AF_NETLINK':")
            return False
        if sent != len(request):
            warn("send 'AF_NETLINK': short write")
            return False
        return True

    def recv(self) -> bytes | None:
        assert self.sock is not None
        try:
            return self.sock.recv(_RESPONSE_SIZE)
        except OSError:
            warn("recv 'AF_NETLINK':")
            return None

    def family(self) -> int:
        if self.family_id:
            return self.family_id
        request = _message(
            GENL_ID_CTRL,
            NLM_F_REQUEST,
            self.next_seq(),
            CTRL_CMD_GETFAMILY,
            CTRL_ATTR_FAMILY_NAME,
            _FAMILY_NAME,
        )
        if self.sock is None:
            if not hasattr(socket, "AF_NETLINK"):
                warn(f"socket 'AF_NETLINK': not available on {sys.platform}")
                return 0
            try:
                self.sock = socket.socket(
                    socket.AF_NETLINK, socket.SOCK_RAW, NETLINK_GENERIC
                )
            except OSError:
                warn("socket 'AF_NETLINK':")
                return 0
        if not self.send(request):
            return 0
        response = self.recv()
        if response is None or len(response) <= len(request):
            return 0
        value = find_attr(CTRL_ATTR_FAMILY_ID, response[len(request) :])
        if value is not None and len(value) == 2:
            (self.family_id,) = struct.unpack("=H", value)
        return self.family_id


_netlink = _Nl80211()


def _ifindex(interface: str) -> int:
    try:
        return socket.if_nametoindex(interface)
    except OSError:
        warn("ioctl 'SIOCGIFINDEX':")
        return -1


def _prepare(interface: str) -> tuple[int, int] | None:
    family = _netlink.family()
    index = _ifindex(interface)
    if not family:
        print("nl80211 family not found", file=sys.stderr)
        return None
    if index < 0:
        print(f"interface {interface} not found", file=sys.stderr)
        return None
    return family, index


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID the interface is connected to."""
    prepared = _prepare(interface)
    if prepared is None:
        return None
    family, index = prepared
    request = _message(
        family,
        NLM_F_REQUEST,
        _netlink.next_seq(),
        NL80211_CMD_GET_INTERFACE,
        NL80211_ATTR_IFINDEX,
        struct.pack("=I", index),
    )
    if not _netlink.send(request):
        return None
    response = _netlink.recv()
    if response is None or len(response) <= NLMSG_HDRLEN + GENL_HDRLEN:
        return None
    ssid = find_attr(NL80211_ATTR_SSID, response[NLMSG_HDRLEN + GENL_HDRLEN :])
    if ssid is None:
        return None
    return ssid.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def wifi_perc(interface: str) -> str | None:
    """Return the average signal strength of the associated station in percent."""
    prepared = _prepare(interface)
    if prepared is None:
        return None
    family, index = prepared
    request = _message(
        family,
        NLM_F_REQUEST | NLM_F_DUMP,
        _netlink.next_seq(),
        NL80211_CMD_GET_STATION,
        NL80211_ATTR_IFINDEX,
        struct.pack("=I", index),
    )
    if not _netlink.send(request):
        return None

    strength: str | None = None
    while True:
        response = _netlink.recv()
        if response is None or len(response) < NLMSG_HDRLEN:
            return None
        strength, done = _scan_dump(response, strength)
        if done:
            return strength