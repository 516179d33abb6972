"""File loading, path-name helpers and a simple CSV line splitter."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def load_binary(file_path: PathLike) -> Optional[bytes]:
    """Return the whole content of a file, or None if it cannot be read."""
    try:
        return Path(file_path).read_bytes()
    except OSError:
        return None


def load_text(file_path: PathLike) -> Optional[str]:
    """Return the content of a file as UTF-8 text, or None if it cannot be read."""
    content = load_binary(file_path)
    if content is None:
        return None
    return content.decode("utf-8")


def ensure_directory_exist(path_str: PathLike) -> None:
    """Create the directory of ``path_str`` if it is missing.

    A path naming an existing directory stands for itself; any other path
    stands for its parent. Only the last level is created.
    """
    path = Path(path_str)
    directory = path if path.is_dir() else path.parent
    if not directory.exists():
        directory.mkdir()


def get_file_name(file_path: PathLike) -> str:
    """Return the last component of the path, extension included."""
    return os.path.basename(os.fspath(file_path))


def get_file_name_without_extension(file_path: PathLike) -> str:
    """Return the last component of the path without its extension."""
    return os.path.splitext(get_file_name(file_path))[0]


def get_file_extension(file_path: PathLike) -> str:
    """Return the extension of the last component, dot included, or ''."""
    return os.path.splitext(get_file_name(file_path))[1]


def _strip_double_quotes(field: str) -> str:
    if len(field) > 2 and field[0] == '"' and field[-1] == '"':
        return field[1:-1]
    return field


def split_csv_line(source_str: str) -> list[str]:
    """Split one CSV line on commas that are not inside double quotes.

    A field wrapped in double quotes loses them when it has something
    between them; inner quotes are kept as they are.
    """
    fields: list[str] = []
    in_quotes = False
    start = 0
    for position, char in enumerate(source_str):
        if char == '"':
            in_quotes = not in_quotes
        if not in_quotes and char == ",":
            fields.append(_strip_double_quotes(source_str[start:position]))
            start = position + 1
    fields.append(_strip_double_quotes(source_str[start:]))
    return fields