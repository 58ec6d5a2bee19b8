"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO


def put_char(char: str, stream: TextIO) -> None:
    """Write a single character to *stream*."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    stream.write(char)


def put_str(text: Optional[str], stream: TextIO) -> None:
    """Write *text* to *stream*; ``None`` writes nothing."""
    if text is None:
        return
    stream.write(text)


def put_endl(text: Optional[str], stream: TextIO) -> None:
    """Write *text* followed by a newline."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(number: int, stream: TextIO) -> None:
    """Write *number* in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    if number < 0:
        put_char("-", stream)
        number = -number
    put_str(str(number), stream)