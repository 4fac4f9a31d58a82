"""A minimal X11 client speaking the core protocol and the XKB extension."""

from __future__ import annotations

import os
import socket
import struct

_WM_NAME = 39
_STRING = 31

_OP_GET_ATOM_NAME = 17
_OP_CHANGE_PROPERTY = 18
_OP_QUERY_EXTENSION = 98
_OP_GET_KEYBOARD_CONTROL = 103

_XKB_USE_EXTENSION = 0
_XKB_GET_STATE = 4
_XKB_GET_NAMES = 17
_XKB_USE_CORE_KBD = 0x100
_XKB_SYMBOLS_NAME_MASK = 1 << 2

_FAMILY_LOCAL = 256
_FAMILY_WILD = 65535
_COOKIE = b"MIT-MAGIC-COOKIE-1"


class X11Error(OSError):
    """Raised when the X server cannot be reached or reports an error."""


def _pad(data: bytes) -> bytes:
    return data + b"\0" * (-len(data) % 4)


class Display:
    """A connection to an X server over an already connected socket."""

    def __init__(self, sock, auth_name: bytes = b"", auth_data: bytes = b"") -> None:
        self._sock = sock
        self._seq = 0
        self._xkb_opcode: int | None = None
        self.root = self._handshake(auth_name, auth_data)

    def __enter__(self) -> Display:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _recv_exact(self, size: int) -> bytes:
        chunks = bytearray()
        while len(chunks) < size:
            try:
                chunk = self._sock.recv(size - len(chunks))
            except OSError as exc:
                raise X11Error(f"X connection failed: {exc}") from exc
            if not chunk:
                raise X11Error("X connection closed")
            chunks += chunk
        return bytes(chunks)

    def _send(self, data: bytes) -> None:
        try:
            self._sock.sendall(data)
        except OSError as exc:
            raise X11Error(f"X connection failed: {exc}") from exc

    def _handshake(self, auth_name: bytes, auth_data: bytes) -> int:
        self._send(
            struct.pack("<BxHHHH2x", 0x6C, 11, 0, len(auth_name), len(auth_data))
            + _pad(auth_name)
            + _pad(auth_data)
        )
        status, reason_len, _major, _minor, extra = struct.unpack(
            "<BBHHH", self._recv_exact(8)
        )
        body = self._recv_exact(extra * 4)
        if status == 0:
            reason = body[:reason_len].decode("latin-1")
            raise X11Error(f"X server refused connection: {reason}")
        if status != 1:
            raise X11Error("X server requires further authentication")
        (vendor_len,) = struct.unpack_from("<H", body, 16)
        formats = body[21]
        offset = 32 + len(_pad(b"\0" * vendor_len)) + 8 * formats
        (root,) = struct.unpack_from("<I", body, offset)
        return root

    def _request(self, opcode: int, data: int, payload: bytes = b"") -> int:
        payload = _pad(payload)
        length = (4 + len(payload)) // 4
        self._send(struct.pack("<BBH", opcode, data, length) + payload)
        self._seq = (self._seq + 1) & 0xFFFF
        return self._seq

    def _reply(self, seq: int) -> bytes:
        while True:
            head = self._recv_exact(32)
            kind = head[0]
            (got,) = struct.unpack_from("<H", head, 2)
            if kind == 0:
                if got == seq:
                    raise X11Error(f"X request failed with error code {head[1]}")
                continue
            if kind == 1:
                (extra,) = struct.unpack_from("<I", head, 4)
                body = self._recv_exact(extra * 4)
                if got == seq:
                    return head + body

    def set_root_name(self, name: str | None) -> None:
        """Set the WM_NAME of the root window; None clears it."""
        data = (name or "").encode("utf-8")
        payload = struct.pack(
            "<IIIB3xI", self.root, _WM_NAME, _STRING, 8, len(data)
        ) + data
        self._request(_OP_CHANGE_PROPERTY, 0, payload)

    def keyboard_led_mask(self) -> int:
        """Return the keyboard LED mask (bit 0 caps lock, bit 1 num lock)."""
        reply = self._reply(self._request(_OP_GET_KEYBOARD_CONTROL, 0))
        return struct.unpack_from("<I", reply, 8)[0]

    def _xkb(self) -> int:
        if self._xkb_opcode is not None:
            return self._xkb_opcode
        name = b"XKEYBOARD"
        reply = self._reply(
            self._request(_OP_QUERY_EXTENSION, 0, struct.pack("<H2x", len(name)) + name)
        )
        if not reply[8]:
            raise X11Error("XKEYBOARD extension not present")
        opcode = reply[9]
        reply = self._reply(
            self._request(opcode, _XKB_USE_EXTENSION, struct.pack("<HH", 1, 0))
        )
        if not reply[1]:
            raise X11Error("XKEYBOARD extension version not supported")
        self._xkb_opcode = opcode
        return opcode

    def keyboard_symbols(self) -> tuple[str, int]:
        """Return the XKB symbols name and the current group number."""
        opcode = self._xkb()
        state = self._reply(
            self._request(opcode, _XKB_GET_STATE, struct.pack("<H2x", _XKB_USE_CORE_KBD))
        )
        group = state[12]
        names = self._reply(
            self._request(
                opcode,
                _XKB_GET_NAMES,
                struct.pack("<H2xI", _XKB_USE_CORE_KBD, _XKB_SYMBOLS_NAME_MASK),
            )
        )
        (atom,) = struct.unpack_from("<I", names, 32)
        reply = self._reply(
            self._request(_OP_GET_ATOM_NAME, 0, struct.pack("<I", atom))
        )
        (length,) = struct.unpack_from("<H", reply, 8)
        return reply[32 : 32 + length].decode("utf-8", errors="replace"), group

    def close(self) -> None:
        """Close the connection."""
        self._sock.close()


def _read_authority(number: str) -> tuple[bytes, bytes]:
    path = os.environ.get("XAUTHORITY") or os.path.expanduser("~/.Xauthority")
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError:
        return b"", b""
    host = socket.gethostname().encode()
    offset = 0
    while offset + 2 <= len(data):
        (family,) = struct.unpack_from(">H", data, offset)
        offset += 2
        fields = []
        for _ in range(4):
            if offset + 2 > len(data):
                return b"", b""
            (size,) = struct.unpack_from(">H", data, offset)
            offset += 2
            fields.append(data[offset : offset + size])
            offset += size
        address, disp, name, cookie = fields
        if name != _COOKIE or disp.decode(errors="replace") != number:
            continue
        if family == _FAMILY_WILD or (family == _FAMILY_LOCAL and address == host):
            return name, cookie
    return b"", b""


def open_display(name: str | None = None) -> Display:
    """Connect to the X display given by name or by $DISPLAY."""
    name = name or os.environ.get("DISPLAY")
    if not name:
        raise X11Error("no display given")
    host, sep, rest = name.rpartition(":")
    number = rest.split(".", 1)[0]
    if not sep or not number.isdigit():
        raise X11Error(f"invalid display name {name!r}")
    try:
        if host.startswith("/"):
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            sock.connect(host)
        elif host in ("", "unix"):
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            sock.connect(f"/tmp/.X11-unix/X{number}")
        else:
            sock = socket.create_connection((host, 6000 + int(number)))
    except OSError as exc:
        raise X11Error(f"cannot connect to display {name!r}: {exc}") from exc
    auth_name, auth_data = _read_authority(number)
    try:
        return Display(sock, auth_name, auth_data)
    except X11Error:
        sock.close()
        raise