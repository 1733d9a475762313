"""String helpers: searching, comparing, bounded copying, slicing and trimming.

Positions are returned as indexes into the string, or None where nothing is
found. The terminating character code 0 is treated as the position just past
the end of the text.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; an int is taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``text``, or None.

    Searching for the NUL character yields the index just past the end.
    """
    char = _char(c)
    if char == _NUL:
        index = text.find(char)
        return len(text) if index < 0 else index
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``text``, or None.

    Searching for the NUL character yields the index just past the end.
    """
    char = _char(c)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the codes of the first unequal pair, a missing
    character counting as code 0, or 0 when the compared parts are equal.
    """
    _check_size("n", n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_size("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``, which tells whether truncation happened.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length it tried to create. When
    ``size`` is no larger than ``dst``, nothing is appended and the length
    reported is ``size + len(src)``.
    """
    _check_size("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty if ``start`` lies past the end."""
    _check_size("start", start)
    _check_size("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if text is None:
        raise TypeError("text is required")
    if not charset:
        return strdup(text)
    return text.strip(charset)