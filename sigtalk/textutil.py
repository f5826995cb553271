"""Small string helpers with the exact rules the tools rely on."""

from __future__ import annotations

from typing import Optional

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, and digits are
    consumed until the first non-digit.  Anything unparsable yields 0.  The
    result wraps around like a 32-bit signed int.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not _is_digit(ch):
            break
        digits.append(ch)
    if not digits:
        return 0
    return _wrap_int32(sign * int("".join(digits)))


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty parts."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [part for part in text.split(sep) if part]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index