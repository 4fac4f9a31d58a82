"""Master volume from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from barstatus.util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)

_VOLUME_CHANNEL = SOUND_DEVICE_NAMES.index("vol")

# _IOR('M', nr, int)
_MIXER_READ_BASE = 0x80044D00
SOUND_MIXER_READ_DEVMASK = _MIXER_READ_BASE | 0xFE
SOUND_MIXER_READ_VOLUME = _MIXER_READ_BASE | _VOLUME_CHANNEL

_INT = struct.Struct("i")


def _ioctl_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, _INT.pack(0))
    return _INT.unpack(result)[0]


def vol_perc(card: str) -> str | None:
    """Return the volume of the mixer's master channel in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None
    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None
        if not devmask & (1 << _VOLUME_CHANNEL):
            return None
        try:
            level = _ioctl_int(fd, SOUND_MIXER_READ_VOLUME)
        except OSError:
            warn(f"ioctl 'MIXER_READ({_VOLUME_CHANNEL})':")
            return None
    finally:
        os.close(fd)
    return str(level & 0xFF)