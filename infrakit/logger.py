"""A callback-based logger with a minimum level filter."""

from __future__ import annotations

import enum
import threading
from typing import Callable, Optional

LogCallback = Callable[[str], None]


class Level(enum.IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2


class Logger:
    """Sends messages at or above the filter level to registered callbacks."""

    def __init__(self) -> None:
        self._filter_level = Level.INFO
        self._callbacks: dict[Level, list[Optional[LogCallback]]] = {level: [] for level in Level}
        self._lock = threading.Lock()

    @property
    def filter_level(self) -> Level:
        return self._filter_level

    def set_filter_level(self, level: Level) -> None:
        self._filter_level = Level(level)

    def add_log_call(self, level: Level, callback: Optional[LogCallback]) -> None:
        """Register ``callback`` for messages of ``level``."""
        self._callbacks[Level(level)].append(callback)

    def _log(self, level: Level, message: str, args: tuple) -> None:
        if self._filter_level > level:
            return
        text = message.format(*args) if args else message
        with self._lock:
            for callback in self._callbacks[level]:
                if callback is not None:
                    callback(text)

    def log_info(self, message: str, *args: object) -> None:
        self._log(Level.INFO, message, args)

    def log_warn(self, message: str, *args: object) -> None:
        self._log(Level.WARNING, message, args)

    def log_error(self, message: str, *args: object) -> None:
        self._log(Level.ERROR, message, args)