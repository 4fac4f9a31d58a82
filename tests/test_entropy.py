from unittest import mock

from barstatus.components.entropy import INFINITY, entropy


def test_entropy_reads_file(tmp_path):
    path = tmp_path / "entropy_avail"
    path.write_text("256\n")
    assert entropy(None, str(path)) == "256"


def test_entropy_missing_file(tmp_path):
    assert entropy(None, str(tmp_path / "missing")) is None


def test_entropy_bad_contents(tmp_path):
    path = tmp_path / "entropy_avail"
    path.write_text("none\n")
    assert entropy(None, str(path)) is None


def test_entropy_bsd_is_infinite(tmp_path):
    with mock.patch("sys.platform", "openbsd7"):
        assert entropy(None, str(tmp_path / "missing")) == INFINITY
    assert INFINITY == "\u221e"