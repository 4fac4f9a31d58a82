# barstatus

A small status monitor. At a fixed interval (one second) it collects pieces
of system information, joins them into one status line and either sets it
as the name (`WM_NAME`) of the X root window, where status bars read it, or
prints it to standard output.

## Installation

```
pip install .
```

## Usage

```
barstatus [-v] [-s] [-1]
```

- `-v` prints the version to standard error and exits with status 1.
- `-s` writes the status line to standard output instead of setting the
  X root window name.
- `-1` writes the status line once to standard output and exits
  (implies `-s`).

Any other option or argument prints a usage message and exits with
status 1.

Without `-1`, barstatus updates the status once every second until it
receives `SIGINT` or `SIGTERM`. When it was setting the root window name,
the name is cleared on exit. `SIGUSR1` triggers an update right away.

```
barstatus -s | some-bar
```

Connecting to X uses `$DISPLAY` (local socket or TCP) and, if present, an
`MIT-MAGIC-COOKIE-1` entry from `$XAUTHORITY` or `~/.Xauthority`. The
connection is handled by `barstatus.x11` (`open_display`, `Display`), which
speaks the X protocol directly and needs no X libraries.

## How the status line is built

`barstatus.config` holds the settings: `INTERVAL` (1000 ms), `UNKNOWN_STR`
(`"n/a"`), `MAXLEN` (2048) and `default_args()`, which returns a list of
`Arg(func, fmt, argument)` entries. The default list has a single entry,
the date and time formatted with `%F %T`.

`barstatus.cli.render_status(args, unknown, maxlen)` calls each `func`
with its `argument`, substitutes `unknown` when a component returns
`None`, formats the result with `fmt` (a `%`-style format) and joins the
pieces, stopping before the line would reach `maxlen` characters.

```python
from barstatus.cli import render_status
from barstatus.config import Arg
from barstatus.components.load_avg import load_avg
from barstatus.components.ram import ram_perc

print(render_status([Arg(load_avg, "load %s", None), Arg(ram_perc, " | mem %s%%", None)]))
```

## Components

Each function takes one argument and returns a string, or `None` when the
value cannot be read (a diagnostic is printed to standard error).

| module (`barstatus.components.…`) | functions | shows | argument |
|---|---|---|---|
| `battery` | `battery_perc`, `battery_state`, `battery_remaining` | capacity, state (`+`, `-`, `o`, `?`), time left `Hh Mm` | battery name (`BAT0`) |
| `cat` | `cat` | first line of a file | path |
| `cpu` | `cpu_freq`, `cpu_perc` | CPU0 frequency, usage since last call | none |
| `dates` | `datetime` | local date and time | strftime format |
| `disk` | `disk_free`, `disk_perc`, `disk_total`, `disk_used` | disk space | mount point |
| `entropy` | `entropy` | available entropy | none |
| `hostname` | `hostname` | host name | none |
| `ip` | `ipv4`, `ipv6`, `up` | interface addresses, `up`/`down` | interface name |
| `kernel_release` | `kernel_release` | kernel release | none |
| `keyboard_indicators` | `keyboard_indicators` | caps/num lock | format such as `c?n?` |
| `keymap` | `keymap` | current keyboard layout | none |
| `load_avg` | `load_avg` | 1, 5 and 15 minute load | none |
| `netspeeds` | `netspeed_rx`, `netspeed_tx` | bytes per second since last call | interface name |
| `num_files` | `num_files` | entries in a directory | path |
| `ram` | `ram_free`, `ram_perc`, `ram_total`, `ram_used` | memory | none |
| `run_command` | `run_command` | first line of a shell command's output | command |
| `swap` | `swap_free`, `swap_perc`, `swap_total`, `swap_used` | swap | none |
| `temperature` | `temp` | whole degrees Celsius | millidegree sensor file |
| `uptime` | `uptime` | uptime `Hh Mm` | none |
| `user` | `gid`, `uid`, `username` | current user | none |
| `volume` | `vol_perc` | OSS mixer master volume in percent | mixer device (`/dev/mixer`) |
| `wifi` | `wifi_essid`, `wifi_perc` | ESSID and signal via nl80211 | interface name |

The `keyboard_indicators` format holds `c` (caps lock) and/or `n` (num
lock). A letter followed by `?` appears, case preserved, only while its
light is on; otherwise it always appears, upper case when on and lower case
when off. The pure helpers `format_indicators`, `get_layout` (keymap),
`format_uptime`, `rssi_to_perc`, `find_attr`, `parse_cpu_times`,
`CpuUsage` and `ByteRate` can be used on their own.

`barstatus.util.fmt_human(num, base)` formats sizes with binary (`Ki`,
`Mi`, `Gi`, …, base 1024) or decimal (`k`, `M`, `G`, …, base 1000)
prefixes, for example `3.2 Gi`.

## What it does not do

- There is no configuration file and no command-line option for choosing
  components: the `barstatus` command always shows `default_args()`.
  Other lines are built by calling `render_status` from your own code.
- The components read Linux interfaces (`/sys`, `/proc`, nl80211, OSS).
  On the BSDs only `entropy` (always `∞`) and the network speeds (through
  psutil) have their own handling; battery, CPU, memory, swap,
  temperature, volume and Wi-Fi readings are not provided there.