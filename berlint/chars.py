"""Character classification and case conversion on single characters.

Every function accepts either an integer character code or a one-character
string. Predicates return booleans. The case converters hand back a value of
the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(value: CharLike) -> int:
    """Return the integer code of *value*, which is an int or a 1-char str."""
    if isinstance(value, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    raise TypeError(
        f"expected a character code or a one-character string, got {type(value).__name__}"
    )


def isalpha(code: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    c = _code(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def isdigit(code: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    c = _code(code)
    return ord("0") <= c <= ord("9")


def isalnum(code: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isdigit(code) or isalpha(code)


def isascii(code: CharLike) -> bool:
    """True for codes in the 7-bit ASCII range 0-127."""
    return 0 <= _code(code) <= 127


def isprint(code: CharLike) -> bool:
    """True for printable ASCII characters, space included (32-126)."""
    return 32 <= _code(code) < 127


def _convert(code: CharLike, low: str, high: str, shift: int) -> CharLike:
    c = _code(code)
    if ord(low) <= c <= ord(high):
        c += shift
    return chr(c) if isinstance(code, str) else c


def toupper(code: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; anything else is unchanged."""
    return _convert(code, "a", "z", -32)


def tolower(code: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; anything else is unchanged."""
    return _convert(code, "A", "Z", 32)