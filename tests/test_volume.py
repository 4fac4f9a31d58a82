import errno
import struct
from unittest.mock import patch

from barstatus.components import volume
from barstatus.components.volume import vol_perc


def _fake_ioctl(devmask, level, calls):
    def ioctl(fd, request, arg):
        calls.append(request)
        if request == volume.SOUND_MIXER_READ_DEVMASK:
            return struct.pack("i", devmask)
        if request == volume.SOUND_MIXER_READ_VOLUME:
            if level is None:
                raise OSError(errno.EINVAL, "Invalid argument")
            return struct.pack("i", level)
        raise OSError(errno.EINVAL, "Invalid argument")

    return ioctl


def _mixer(tmp_path):
    path = tmp_path / "mixer"
    path.write_bytes(b"")
    return str(path)


def test_missing_device(tmp_path):
    assert vol_perc(str(tmp_path / "nosuch")) is None


def test_regular_file_is_not_a_mixer(tmp_path):
    assert vol_perc(_mixer(tmp_path)) is None


def test_reads_left_channel_level(tmp_path):
    calls = []
    with patch("fcntl.ioctl", side_effect=_fake_ioctl(1, (55 << 8) | 55, calls)):
        assert vol_perc(_mixer(tmp_path)) == "55"
    assert calls == [0x80044DFE, 0x80044D00]


def test_only_low_byte_is_used(tmp_path):
    calls = []
    with patch("fcntl.ioctl", side_effect=_fake_ioctl(1, (90 << 8) | 20, calls)):
        assert vol_perc(_mixer(tmp_path)) == "20"


def test_no_volume_channel(tmp_path):
    calls = []
    with patch("fcntl.ioctl", side_effect=_fake_ioctl(0b10, 50, calls)):
        assert vol_perc(_mixer(tmp_path)) is None
    assert calls == [0x80044DFE]


def test_level_read_failure(tmp_path):
    calls = []
    with patch("fcntl.ioctl", side_effect=_fake_ioctl(1, None, calls)):
        assert vol_perc(_mixer(tmp_path)) is None