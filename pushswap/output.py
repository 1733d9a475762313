"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

CharLike = Union[int, str]


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character; an int is taken as a byte value modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    elif isinstance(c, int) and not isinstance(c, bool):
        char = chr(c & 0xFF)
    else:
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    _stream(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; nothing is written when it is None."""
    if text is None:
        return
    _stream(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; nothing is written when it is None."""
    if text is None:
        return
    _stream(stream).write(text + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _stream(stream).write(str(n))