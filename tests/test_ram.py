import pytest

from barstatus.components.ram import ram_free, ram_perc, ram_total, ram_used
from barstatus.util import fmt_human

MEMINFO = """MemTotal:        8000 kB
MemFree:         2000 kB
MemAvailable:    5000 kB
Buffers:          500 kB
Cached:          1500 kB
SwapCached:         0 kB
Shmem:            200 kB
SReclaimable:     200 kB
"""


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    return str(path)


def test_total(meminfo):
    assert ram_total(None, meminfo) == fmt_human(8000 * 1024, 1024)


def test_free(meminfo):
    assert ram_free(None, meminfo) == fmt_human(2000 * 1024, 1024)


def test_used_combines_fields(meminfo):
    used = 8000 - 2000 - 500 - 1500 - 200 + 200
    assert ram_used(None, meminfo) == fmt_human(used * 1024, 1024)


def test_perc(meminfo):
    assert ram_perc(None, meminfo) == "47"


def test_perc_in_range(meminfo):
    assert 0 <= int(ram_perc(None, meminfo)) <= 100


def test_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO.replace("MemTotal:        8000", "MemTotal:        0"))
    assert ram_perc(None, str(path)) is None


def test_missing_field(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 8000 kB\nMemFree: 2000 kB\n")
    assert ram_used(None, str(path)) is None
    assert ram_perc(None, str(path)) is None
    assert ram_free(None, str(path)) == fmt_human(2000 * 1024, 1024)


def test_missing_file(tmp_path):
    assert ram_total(None, str(tmp_path / "absent")) is None