"""A small ``printf`` with the conversions the tools use.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``.  Any other character after ``%`` is written out
unchanged together with the percent sign.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

from sigtalk.textutil import itoa

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value >= 2**31 else value


def _to_hex(value: int, digits: str) -> str:
    value &= _ULONG_MASK
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def hex_lower(value: int) -> str:
    """Return ``value`` as lower-case hexadecimal, wrapped to 64 bits."""
    return _to_hex(value, _HEX_LOWER)


def hex_upper(value: int) -> str:
    """Return ``value`` as upper-case hexadecimal, wrapped to 64 bits."""
    return _to_hex(value, _HEX_UPPER)


def pointer_hex(value: int) -> str:
    """Render an address: ``(nil)`` for zero, else ``0x`` and lower-case hex."""
    if value == 0:
        return "(nil)"
    return "0x" + hex_lower(value)


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c needs a single character")
        return arg
    return chr(int(arg) & 0xFF)


def _string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": lambda arg: pointer_hex(int(arg)),
    "d": lambda arg: itoa(_to_int32(int(arg))),
    "i": lambda arg: itoa(_to_int32(int(arg))),
    "u": lambda arg: str(int(arg) & _UINT_MASK),
    "x": lambda arg: hex_lower(int(arg) & _UINT_MASK),
    "X": lambda arg: hex_upper(int(arg) & _UINT_MASK),
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            yield "%"
            return
        if spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for conversion %{spec}"
                ) from None
            yield _CONVERSIONS[spec](arg)
        else:
            yield "%" + spec


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    if fmt is None:
        raise TypeError("format must not be None")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)