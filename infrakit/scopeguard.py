"""A context manager that runs a cleanup callable when its block ends."""

from __future__ import annotations

from types import TracebackType
from typing import Callable, Optional


class ScopeGuard:
    """Runs ``cleanup`` when the ``with`` block is left, however it is left."""

    def __init__(self, cleanup: Callable[[], object]) -> None:
        self._cleanup = cleanup

    def __enter__(self) -> "ScopeGuard":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self._cleanup()