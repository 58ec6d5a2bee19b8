"""Reading map files line by line."""

from __future__ import annotations

import os
from typing import Iterable, Iterator, List, TextIO

from berlint.strings import strdup
from berlint.transform import split

BUFFER_SIZE = 42


def iter_lines(stream: TextIO, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of *stream*, each with its newline if it had one.

    The stream is read in chunks of *buffer_size* characters.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    return _lines(stream, buffer_size)


def _lines(stream: TextIO, buffer_size: int) -> Iterator[str]:
    pending = ""
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending += chunk
        while (pos := pending.find("\n")) >= 0:
            yield pending[: pos + 1]
            pending = pending[pos + 1 :]
    if pending:
        yield pending


def join(parts: Iterable[str]) -> str:
    """Concatenate *parts*, each taken up to its first NUL."""
    return "".join(strdup(part) for part in parts)


def read_map_lines(stream: TextIO) -> List[str]:
    """Read all of *stream* and return its non-empty lines without newlines."""
    return split(join(iter_lines(stream)), "\n")


def _open_map(path) -> TextIO:
    fd = os.open(os.fspath(path), os.O_CREAT | os.O_RDONLY, 0o400)
    return os.fdopen(fd, "r", encoding="latin-1", newline="")


def count_lines(path) -> int:
    """Count the lines of the file at *path*, creating it empty if missing."""
    with _open_map(path) as stream:
        return sum(1 for _ in iter_lines(stream))