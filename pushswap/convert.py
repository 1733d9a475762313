"""Number/text conversion, splitting and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence

_WHITESPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_INT_BITS = 32


def _to_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _trunc_div10(value: int) -> int:
    """Divide by ten, rounding toward zero."""
    return value // 10 if value >= 0 else -((-value) // 10)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Text without digits gives 0. A value that
    does not fit in a 64-bit long gives -1 when positive and 0 when negative;
    a value that fits in a long but not in a 32-bit int wraps around.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    num = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if sign == 1 and num > (_LONG_MAX - digit) // 10:
            return _to_int32(_LONG_MAX)
        if sign == -1 and -num < _trunc_div10(_LONG_MIN + digit):
            return _to_int32(_LONG_MIN)
        num = num * 10 + digit
    return _to_int32(_to_int32(num) * sign)


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every element of ``chars`` in place with ``func(index, char)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)