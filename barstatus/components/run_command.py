"""First line of output of a shell command."""

from __future__ import annotations

import subprocess

from barstatus.util import LINE_LIMIT, warn


def run_command(cmd: str) -> str | None:
    """Run cmd through the shell and return the first line it prints."""
    try:
        proc = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError:
        warn(f"popen '{cmd}':")
        return None

    assert proc.stdout is not None
    with proc.stdout:
        raw = proc.stdout.readline(LINE_LIMIT)
    try:
        proc.wait()
    except OSError:
        warn(f"pclose '{cmd}':")
        return None

    line = raw.decode("utf-8", errors="replace").removesuffix("\n")
    return line or None