import pytest

from barstatus.components.netspeeds import ByteRate, netspeed_rx, netspeed_tx
from barstatus.util import fmt_human


def _write(root, interface, direction, value):
    stats = root / interface / "statistics"
    stats.mkdir(parents=True, exist_ok=True)
    (stats / f"{direction}_bytes").write_text(f"{value}\n")


def test_first_update_has_no_rate():
    assert ByteRate().update(5000, 1000) is None


def test_rate_over_one_second():
    rate = ByteRate()
    rate.update(1000, 1000)
    assert rate.update(3000, 1000) == 2000


def test_rate_scales_with_interval():
    fast = ByteRate()
    slow = ByteRate()
    fast.update(1000, 500)
    slow.update(1000, 1000)
    assert fast.update(2000, 500) == 2 * slow.update(2000, 1000)


def test_zero_previous_counter_gives_none():
    rate = ByteRate()
    rate.update(0, 1000)
    assert rate.update(100, 1000) is None


def test_counter_going_backwards_gives_none():
    rate = ByteRate()
    rate.update(5000, 1000)
    assert rate.update(100, 1000) is None
    assert rate.previous == 100


@pytest.mark.parametrize(
    "func, direction", [(netspeed_rx, "rx"), (netspeed_tx, "tx")]
)
def test_netspeed_from_sysfs(tmp_path, func, direction):
    _write(tmp_path, "eth9", direction, 1000)
    assert func("eth9", str(tmp_path)) is None
    _write(tmp_path, "eth9", direction, 4096)
    assert func("eth9", str(tmp_path)) == fmt_human(3096, 1024)


def test_netspeed_missing_interface(tmp_path):
    assert netspeed_rx("nosuch0", str(tmp_path)) is None
    assert netspeed_tx("nosuch0", str(tmp_path)) is None


def test_rx_and_tx_are_tracked_separately(tmp_path):
    _write(tmp_path, "eth8", "rx", 100)
    _write(tmp_path, "eth8", "tx", 100)
    assert netspeed_rx("eth8", str(tmp_path)) is None
    assert netspeed_tx("eth8", str(tmp_path)) is None
    _write(tmp_path, "eth8", "rx", 2148)
    assert netspeed_rx("eth8", str(tmp_path)) == fmt_human(2048, 1024)