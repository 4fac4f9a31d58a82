"""CPU frequency and usage."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from barstatus.util import fmt_human, read_int, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user, nice, system, idle, iowait, irq, softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def parse_cpu_times(text: str) -> tuple[int, ...]:
    """Return the first seven counters of the aggregate cpu line of /proc/stat."""
    fields = text.split()
    if len(fields) < _FIELDS + 1:
        raise ValueError("cpu line has too few fields")
    return tuple(int(value) for value in fields[1 : _FIELDS + 1])


@dataclass
class CpuUsage:
    """Turns successive cumulative cpu counters into a usage percentage."""

    previous: tuple[int, ...] | None = None

    def update(self, times: Iterable[int]) -> int | None:
        """Record new counters and return usage since the last call, if known."""
        current = tuple(times)
        previous, self.previous = self.previous, current
        if previous is None or previous[0] == 0:
            return None

        total = sum(current) - sum(previous)
        if total == 0:
            return None
        busy = sum(current[i] - previous[i] for i in _BUSY)
        return int(100 * busy / total)


_trackers: dict[str, CpuUsage] = {}


def cpu_freq(unused: str | None = None, path: str = CPU_FREQ) -> str | None:
    """Return the current frequency of the first cpu."""
    khz = read_int(path)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


def cpu_perc(unused: str | None = None, path: str = PROC_STAT) -> str | None:
    """Return cpu usage in percent since the previous call."""
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.readline()
    except OSError:
        warn(f"fopen '{path}':")
        return None
    try:
        times = parse_cpu_times(text)
    except ValueError:
        return None
    usage = _trackers.setdefault(path, CpuUsage()).update(times)
    return None if usage is None else str(usage)