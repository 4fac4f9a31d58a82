"""Command line entry point: render the status and publish it."""

from __future__ import annotations

import select
import signal
import socket
import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass

from barstatus.config import INTERVAL, MAXLEN, UNKNOWN_STR, Arg, default_args
from barstatus.util import die, warn
from barstatus.x11 import X11Error, open_display

VERSION = "1.1"
PROG = "barstatus"


@dataclass
class Options:
    """Parsed command line flags."""

    sflag: bool = False
    once: bool = False


def render_status(args: Iterable[Arg], unknown: str = UNKNOWN_STR, maxlen: int = MAXLEN) -> str:
    """Join the formatted output of every component, stopping before overflow."""
    parts: list[str] = []
    length = 0
    for arg in args:
        res = arg.func(arg.argument)
        if res is None:
            res = unknown
        piece = arg.fmt % res
        if len(piece) >= maxlen - length:
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        length += len(piece)
    return "".join(parts)


def _usage() -> None:
    die(f"usage: {PROG} [-v] [-s] [-1]")


def parse_args(argv: list[str]) -> Options:
    """Parse -v, -s and -1 flags; exit on anything else."""
    opts = Options()
    rest = list(argv)
    while rest and rest[0].startswith("-") and len(rest[0]) > 1:
        arg = rest.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                die(f"{PROG}-{VERSION}")
            elif flag == "1":
                opts.once = True
                opts.sflag = True
            elif flag == "s":
                opts.sflag = True
            else:
                _usage()
    if rest:
        _usage()
    return opts


def main(argv: list[str] | None = None) -> int:
    """Run the status loop."""
    opts = parse_args(sys.argv[1:] if argv is None else argv)
    done = opts.once

    def terminate(signo, frame):
        nonlocal done
        if signo != signal.SIGUSR1:
            done = True

    reader, writer = socket.socketpair()
    reader.setblocking(False)
    writer.setblocking(False)
    previous = {
        sig: signal.signal(sig, terminate)
        for sig in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)
    }
    old_fd = signal.set_wakeup_fd(writer.fileno())

    display = None
    try:
        if not opts.sflag:
            try:
                display = open_display()
            except X11Error:
                die("XOpenDisplay: Failed to open display")
        args = default_args()
        while True:
            start = time.monotonic()
            status = render_status(args)
            if display is None:
                try:
                    print(status, flush=True)
                except OSError:
                    die("puts:")
            else:
                try:
                    display.set_root_name(status)
                except X11Error:
                    die("XStoreName: Allocation failed")
            if done:
                break
            wait = INTERVAL / 1000 - (time.monotonic() - start)
            if wait >= 0:
                ready, _, _ = select.select([reader], [], [], wait)
                if ready:
                    try:
                        while reader.recv(64):
                            pass
                    except BlockingIOError:
                        pass
            if done:
                break
        if display is not None:
            try:
                display.set_root_name(None)
                display.close()
            except X11Error:
                die("XCloseDisplay: Failed to close display")
    finally:
        signal.set_wakeup_fd(old_fd)
        for sig, handler in previous.items():
            signal.signal(sig, handler)
        reader.close()
        writer.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())