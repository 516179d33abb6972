# infrakit

A library of small infrastructure helpers for Python programs.

| Module | What it holds |
| --- | --- |
| `infrakit.commandline` | `CommandLine`, an option parser for flags (`OptionNoValue`), single-value (`OptionSingleValue`) and multi-value (`OptionMultiValue`) options, chosen with `CmdOptionType` |
| `infrakit.logger` | `Logger`, which passes messages at or above a filter `Level` to registered callbacks |
| `infrakit.fileutil` | `load_binary`, `load_text`, `ensure_directory_exist`, path-name helpers and `split_csv_line` |
| `infrakit.strings` | `split`, `join`, `replace`, `trim_start`, `trim_end`, `trim`, `to_utf8`, `from_utf8` |
| `infrakit.timer` | `Timer`, a monotonic interval timer with a `TimePrecision` |
| `infrakit.scopeguard` | `ScopeGuard`, a context manager that runs a cleanup callable when its block ends |
| `infrakit.image` | `Pixel` and `Image`, an RGBA image with pixel access, vertical flipping and decoding through Pillow |
| `infrakit.ipaddr` | `IpAddress` and `Family` for IPv4 and IPv6 addresses |
| `infrakit.endpoint` | `EndPoint`, an address with a port and an IPv6 scope id |
| `infrakit.dns` | `get_ip_address`, `get_local_ip_address`, `get_host_name` |
| `infrakit.sockets` | `Socket`, `SocketState` and `error_state` |
| `infrakit.tcpsocket` | `TcpSocket`, a TCP client socket whose operations return a `SocketState` |
| `infrakit.system` | machine and user names, environment variables, home, working, executable and temporary directories |
| `infrakit.process` | starting child processes, waiting for them, and talking to them through pipes (`ProcessInfo`) |
| `infrakit.console` | `render_progress_bar` and `progress_bar` |

## Installation

```
pip install infrakit
```

With the test requirements:

```
pip install "infrakit[test]"
```

## Command-line options

```python
from infrakit.commandline import CommandLine, CmdOptionType

cmd = CommandLine()
name = cmd.add_option(CmdOptionType.SINGLE_VALUE, "name of the run", full_name="name", short_name="n")
silent = cmd.add_option(CmdOptionType.NO_VALUE, "silent mode", full_name="silent", short_name="s")
inputs = cmd.add_option(CmdOptionType.MULTI_VALUE, "input files", full_name="input", short_name="i")
port = cmd.add_option(CmdOptionType.SINGLE_VALUE, "port", full_name="port", short_name="p")

cmd.parse(["prog", "--name", "demo", "-s", "-i", "a.txt", "b.txt", "-p", "6666"])

name.get_value()          # 'demo'
silent.settled            # True
inputs.values             # ['a.txt', 'b.txt']
port.get_value(int)       # 6666
```

- Long options are written `--name`, short options `-n` (a single letter).
- A multi-value option takes every following argument up to the next one that looks like an option.
- Arguments that match no option are collected in `cmd.invalid_input`. With `CommandLine(exit_when_error_input=True)` an unknown option prints `Invalid option: <name>` and exits with `error_input_exit_code` (1 by default).
- `parse` with no arguments after the program name, or with only `-h`, `-help` or `-?`, prints the help text and exits with status 0. The help text lists every option with its description; pass `help_message_func` to print your own instead.
- Registering the same full or short name twice raises `ValueError`.

## Logging through callbacks

```python
from infrakit.logger import Level, Logger

log = Logger()
log.add_log_call(Level.WARNING, print)
log.set_filter_level(Level.WARNING)
log.log_warn("disk usage at {}%", 91)   # prints "disk usage at 91%"
log.log_info("dropped")                 # below the filter level
```

Extra arguments are applied with `str.format`. Callbacks are called under a lock.

## Files and strings

```python
from infrakit.fileutil import load_text, get_file_extension, split_csv_line
from infrakit.strings import split, trim

load_text("missing.txt")                 # None when the file cannot be read
get_file_extension("dir/report.tar.gz")  # '.gz'
split_csv_line('a,"b,c",d')              # ['a', 'b,c', 'd']
split("x;y;z", ";")                      # ['x', 'y', 'z']
trim("  padded \t")                      # 'padded'
```

## Timing and cleanup

```python
from infrakit.timer import Timer, TimePrecision
from infrakit.scopeguard import ScopeGuard

timer = Timer(TimePrecision.MILLISECONDS)
timer.set_now()
with ScopeGuard(lambda: print("done")):
    ...
elapsed = timer.get_interval_and_set_now()
```

## Images

```python
from infrakit.image import Image, Pixel

image = Image(4, 2, Pixel(255, 0, 0))
image.set_pixel(0, 0, Pixel(0, 0, 255, 128))
image.get_pixel(9, 9)      # Pixel(r=0, g=0, b=0, a=0) outside the image
image.vertical_flip()
image.bytes_data           # RGBA bytes, row after row from the top

loaded = Image.from_file("picture.png")   # empty image if it cannot be decoded
```

## Addresses and TCP

```python
from infrakit.ipaddr import IpAddress
from infrakit.endpoint import EndPoint
from infrakit.tcpsocket import TcpSocket
from infrakit.sockets import SocketState

ip = IpAddress.try_parse("127.0.0.1")
endpoint = EndPoint(ip, 8080)

tcp = TcpSocket.create()
if tcp.connect(endpoint, timeout_in_ms=1000) is SocketState.SUCCESS:
    state, sent = tcp.send(b"hello")
    state, data = tcp.receive(1024)
tcp.disconnect()
```

`TcpSocket` methods do not raise on network failures; they return a `SocketState` (`SUCCESS`, `BUSY`, `DISCONNECT` or `ERROR`), classified from the system error number by `error_state`.

## System and processes

```python
from infrakit import system, process

system.get_home_directory()
system.set_environment_variable("MY_FLAG", "1")   # an empty value removes it

code = process.create_process_and_wait_finish("python -c 'print(1)'")

child = process.create_process_with_pipe("cat")
process.send_data_to_process(child, b"ping\n")
process.read_data_from_process(child, 1024)
process.wait_process_finish(child)
```

On POSIX systems the command line is split shell-style; on Windows it is passed as one string.

## Progress bar

```python
from infrakit.console import progress_bar, render_progress_bar

render_progress_bar(0.5, 10)   # '[=====>    ] 50 %'
progress_bar(0.5)              # written to stdout, ending with a carriage return
```

## What it does not do

- It installs no command of its own; it is a library only.
- Networking covers TCP clients only: there is no UDP socket and no listening or accepting server socket.
- The console module draws a progress bar and nothing else: no text colours, screen clearing or console allocation.
- There are no file dialogs, virtual-memory helpers or platform log outputs.