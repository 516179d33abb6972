"""A text progress bar for the console."""

from __future__ import annotations

import math
import struct
import sys
from typing import Optional, TextIO

_FLOAT32 = struct.Struct("<f")


def _as_float32(value: float) -> float:
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def _clamp(progress: float) -> float:
    if math.isnan(progress):
        raise ValueError("progress must be a number, not NaN")
    return min(max(progress, 0.0), 1.0)


def render_progress_bar(progress: float, bar_width: int = 70) -> str:
    """Return the progress bar text for ``progress``, clamped to 0..1.

    The bar holds ``bar_width`` cells: ``=`` for the part done, ``>`` at the
    current position and spaces after it, followed by the percentage.
    """
    progress = _as_float32(_clamp(float(progress)))
    position = int(_as_float32(bar_width * progress))
    cells = "".join(
        "=" if cell < position else ">" if cell == position else " "
        for cell in range(bar_width)
    )
    return f"[{cells}] {progress * 100.0:g} %"


def progress_bar(progress: float, bar_width: int = 70, stream: Optional[TextIO] = None) -> None:
    """Write the progress bar to ``stream`` (stdout by default), returning to line start."""
    out = sys.stdout if stream is None else stream
    out.write(render_progress_bar(progress, bar_width) + "\r")
    out.flush()