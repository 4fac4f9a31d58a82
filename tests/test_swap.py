import pytest

from barstatus.components.swap import swap_free, swap_perc, swap_total, swap_used
from barstatus.util import fmt_human

MEMINFO = """MemTotal:        8000 kB
MemFree:         2000 kB
SwapCached:       100 kB
SwapTotal:       4000 kB
SwapFree:        2900 kB
"""


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    return str(path)


def test_total(meminfo):
    assert swap_total(None, meminfo) == fmt_human(4000 * 1024, 1024)


def test_free(meminfo):
    assert swap_free(None, meminfo) == fmt_human(2900 * 1024, 1024)


def test_used(meminfo):
    assert swap_used(None, meminfo) == fmt_human((4000 - 2900 - 100) * 1024, 1024)


def test_perc(meminfo):
    assert swap_perc(None, meminfo) == "25"


def test_perc_without_swap(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("SwapCached: 0 kB\nSwapTotal: 0 kB\nSwapFree: 0 kB\n")
    assert swap_perc(None, str(path)) is None
    assert swap_total(None, str(path)) == fmt_human(0, 1024)


def test_missing_field(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("SwapTotal: 4000 kB\n")
    assert swap_used(None, str(path)) is None


def test_missing_file(tmp_path):
    assert swap_free(None, str(tmp_path / "absent")) is None