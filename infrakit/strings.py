"""String helpers: UTF-8 conversion, split, join, replace and trimming."""

from __future__ import annotations

from typing import Iterable

# Characters the C locale counts as white space.
_WHITESPACE = " \t\n\v\f\r"


def to_utf8(text: str) -> bytes:
    """Encode text as UTF-8, stopping at the first NUL character."""
    return text.split("\0", 1)[0].encode("utf-8")


def from_utf8(data: bytes) -> str:
    """Decode UTF-8 bytes, stopping at the first NUL character."""
    return bytes(data).split(b"\0", 1)[0].decode("utf-8")


def split(input_str: str, delim: str) -> list[str]:
    """Split on every occurrence of ``delim``.

    An empty input gives no parts; an empty delimiter splits into characters.
    """
    if not input_str:
        return []
    if not delim:
        return list(input_str)
    return input_str.split(delim)


def join(str_list: Iterable[str], delim: str) -> str:
    """Join the strings with ``delim`` between them."""
    return delim.join(str_list)


def replace(in_str: str, old: str, new: str) -> str:
    """Replace every non-overlapping ``old``, scanning left to right."""
    if not old:
        raise ValueError("the text to replace must not be empty")
    return in_str.replace(old, new)


def trim_start(text: str) -> str:
    """Remove leading white space."""
    return text.lstrip(_WHITESPACE)


def trim_end(text: str) -> str:
    """Remove trailing white space."""
    return text.rstrip(_WHITESPACE)


def trim(text: str) -> str:
    """Remove white space at both ends."""
    return trim_end(trim_start(text))