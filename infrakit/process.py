"""Starting child processes, waiting on them and talking to them through pipes."""

from __future__ import annotations

import os
import shlex
import subprocess
import threading
from dataclasses import dataclass
from typing import Optional, Union

import psutil

_WINDOWS = os.name == "nt"

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass
class ProcessInfo:
    """A child process whose standard input and output are pipes."""

    process: "subprocess.Popen[bytes]"

    @property
    def pid(self) -> int:
        return self.process.pid


def _command_args(command_line: str) -> Union[str, list[str], None]:
    if _WINDOWS:
        return command_line if command_line.strip() else None
    try:
        args = shlex.split(command_line)
    except ValueError:
        return None
    return args or None


def _start(command_line: str, **kwargs: object) -> Optional["subprocess.Popen[bytes]"]:
    args = _command_args(command_line)
    if args is None:
        return None
    try:
        return subprocess.Popen(args, **kwargs)  # type: ignore[call-overload]
    except (OSError, ValueError):
        return None


def _reap_in_background(process: "subprocess.Popen[bytes]") -> None:
    threading.Thread(target=process.wait, daemon=True).start()


def _close_pipes(process_info: ProcessInfo) -> None:
    for pipe in (process_info.process.stdin, process_info.process.stdout):
        if pipe is None:
            continue
        try:
            pipe.close()
        except OSError:
            pass


def get_current_process_id() -> int:
    """Return the id of this process."""
    return os.getpid()


def get_process_name(process_id: int) -> str:
    """Return the executable path of a process, or '' if it cannot be read."""
    try:
        process = psutil.Process(process_id)
        try:
            return process.exe() or process.name()
        except psutil.AccessDenied:
            return process.name()
    except (psutil.Error, ValueError, OSError):
        return ""


def create_process_and_wait_finish(command_line: str) -> Optional[int]:
    """Run a command, wait for it and return its exit code, or None if it did not start."""
    process = _start(command_line)
    if process is None:
        return None
    return process.wait()


def create_process_and_detach(command_line: str) -> bool:
    """Start a command without waiting for it; return whether it started."""
    process = _start(command_line)
    if process is None:
        return False
    _reap_in_background(process)
    return True


def create_process_with_pipe(command_line: str) -> Optional[ProcessInfo]:
    """Start a command whose input, output and error output are pipes to this process."""
    process = _start(
        command_line,
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    )
    if process is None:
        return None
    return ProcessInfo(process)


def wait_process_finish(process_info: ProcessInfo) -> int:
    """Close the pipes, wait for the process and return its exit code."""
    _close_pipes(process_info)
    return process_info.process.wait()


def send_data_to_process(process_info: ProcessInfo, data: Optional[BytesLike]) -> Optional[int]:
    """Write to the child's standard input; return the bytes written, or None on failure."""
    stdin = process_info.process.stdin
    if data is None or stdin is None:
        return None
    try:
        written = stdin.write(bytes(data))
        stdin.flush()
    except (OSError, ValueError):
        return None
    return written


def read_data_from_process(process_info: ProcessInfo, buffer_size: int) -> Optional[bytes]:
    """Read up to ``buffer_size`` bytes of the child's output; None at end or on failure."""
    stdout = process_info.process.stdout
    if stdout is None or buffer_size <= 0:
        return None
    try:
        data = stdout.read1(buffer_size)
    except (OSError, ValueError):
        return None
    return data or None


def detach_process(process_info: ProcessInfo) -> None:
    """Close the pipes and stop tracking the process without waiting for it."""
    _close_pipes(process_info)
    _reap_in_background(process_info.process)