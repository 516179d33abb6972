"""Machine, user, environment and directory queries."""

from __future__ import annotations

import getpass
import os
import socket
import sys
import tempfile
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_WINDOWS = os.name == "nt"


def get_machine_name() -> str:
    """Return this machine's name, or '' if it cannot be read."""
    try:
        return socket.gethostname()
    except OSError:
        return ""


def get_current_user_name() -> str:
    """Return the name of the user running this process, or ''."""
    if not _WINDOWS:
        return get_environment_variable("USER")
    try:
        return getpass.getuser()
    except (OSError, KeyError, ImportError):
        return ""


def get_environment_variable(key_name: str) -> str:
    """Return the value of an environment variable, or '' if it is unset."""
    return os.environ.get(key_name, "")


def set_environment_variable(key_name: str, value: str) -> None:
    """Set an environment variable; an empty value removes it."""
    if value:
        os.environ[key_name] = value
    else:
        os.environ.pop(key_name, None)


def get_home_directory() -> str:
    """Return the current user's home directory."""
    if _WINDOWS:
        profile = get_environment_variable("USERPROFILE")
        if profile:
            return profile
        return get_environment_variable("HOMEDRIVE") + get_environment_variable("HOMEPATH")
    return get_environment_variable("HOME") or "/"


def get_current_directory() -> str:
    """Return the working directory, or '' if it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        return ""


def set_current_directory(path: PathLike) -> bool:
    """Change the working directory; return False if that fails."""
    try:
        os.chdir(path)
    except OSError:
        return False
    return True


def get_executable_directory() -> str:
    """Return the full path of the running executable, or ''."""
    if not _WINDOWS:
        try:
            return os.readlink("/proc/self/exe")
        except OSError:
            pass
    return sys.executable or ""


def get_temp_directory() -> str:
    """Return the directory for temporary files."""
    if _WINDOWS:
        for key in ("TMP", "TEMP", "USERPROFILE"):
            value = get_environment_variable(key)
            if value:
                return value
        return tempfile.gettempdir()
    return get_environment_variable("TMPDIR") or "/tmp"