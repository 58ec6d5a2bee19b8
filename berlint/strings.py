"""String helpers with C-string semantics on Python ``str`` values.

A string ends at its first NUL character, as a C string would. Searches
return an index into the string, or ``None`` when nothing is found.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

_INT_BITS = 32
_WHITESPACE = " \t\n\v\f\r"


def _cstr(text: str) -> str:
    """Return *text* cut at its first NUL character."""
    if text is None:
        raise TypeError("text must not be None")
    return text.split("\0", 1)[0]


def _char(char: Union[str, int]) -> str:
    if isinstance(char, bool):
        raise TypeError("expected a character")
    if isinstance(char, int):
        return chr(char)
    if isinstance(char, str) and len(char) == 1:
        return char
    raise ValueError(f"expected a single character, got {char!r}")


def _wrap_int(value: int) -> int:
    """Wrap *value* into the range of a 32-bit signed integer."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(text))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of *src*.

    Returns the copy and the full length of *src*. With *size* 0 nothing is
    copied and the copy is empty.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src = _cstr(src)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* so the result fits a buffer of *size* characters.

    Returns the new string and the length that a large enough buffer would
    have held. When *size* does not exceed the length of *dst*, *dst* is
    returned unchanged together with ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src = _cstr(src)
    if size == 0:
        return dst, len(src)
    dst = _cstr(dst)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(src) + len(dst)


def strchr(text: str, char: Union[str, int]) -> Optional[int]:
    """Index of the first *char* in *text*; NUL matches the terminator."""
    text = _cstr(text)
    char = _char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: Union[str, int]) -> Optional[int]:
    """Index of the last *char* in *text*; NUL matches the terminator."""
    text = _cstr(text)
    char = _char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strcmp(first: str, second: str) -> int:
    """Compare two strings; return the difference of the first unequal pair, else 0."""
    first = _cstr(first)
    second = _cstr(second)
    longest = max(len(first), len(second))
    padded_first = first.ljust(longest, "\0")
    padded_second = second.ljust(longest, "\0")
    for a, b in zip(padded_first, padded_second):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: Optional[str], needle: str, length: int) -> Optional[int]:
    """Find *needle* within the first *length* characters of *haystack*.

    An empty needle matches at 0. A ``None`` haystack with *length* 0 gives
    ``None``.
    """
    if haystack is None:
        if length == 0:
            return None
        raise TypeError("haystack must not be None")
    if length < 0:
        raise ValueError("length must not be negative")
    haystack = _cstr(haystack)
    needle = _cstr(needle)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed int.

    Leading whitespace is skipped and one sign is accepted; two signs in a row
    give 0. Parsing stops at the first non-digit, and overflow wraps around.
    """
    text = _cstr(text).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[:1] == "-":
            sign = -1
        text = text[1:]
        if text[:1] in ("-", "+"):
            return 0
    number = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return _wrap_int(number * sign)


def strdup(text: str) -> str:
    """Return a copy of *text* up to its first NUL."""
    return _cstr(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A *start* at or past the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(text)
    if start >= len(text):
        return ""
    return text[start : start + length]