"""String builders: joining, trimming, splitting and per-character mapping.

Strings follow C-string rules: everything from the first NUL character on is
ignored.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

from berlint.strings import strdup


def _require(text: Optional[str], name: str) -> str:
    if text is None:
        raise TypeError(f"{name} must not be None")
    return strdup(text)


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    return _require(first, "first") + _require(second, "second")


def strtrim(text: str, charset: str) -> str:
    """Strip every character found in *charset* from both ends of *text*."""
    text = _require(text, "text")
    charset = _require(charset, "charset")
    return text.strip(charset) if charset else text


def split(text: str, sep: str) -> List[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    text = _require(text, "text")
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return str(number)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character.

    A NUL returned by *func* ends the result.
    """
    text = _require(text, "text")
    if func is None:
        raise TypeError("func must not be None")
    return strdup("".join(func(index, char) for index, char in enumerate(text)))


def striteri(chars: Optional[MutableSequence[str]], func: Optional[Callable[[int, str], str]]) -> None:
    """Replace each character of *chars* in place with ``func(index, char)``.

    Iteration covers the characters before the first NUL element. Nothing
    happens when *chars* or *func* is ``None``.
    """
    if chars is None or func is None:
        return
    length = next((index for index, char in enumerate(chars) if char == "\0"), len(chars))
    for index in range(length):
        chars[index] = func(index, chars[index])