"""Formatted output supporting the c, s, d, i, u, x, X, p and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_signed32(_as_int(value, spec)))
    if spec == "u":
        return str(_as_int(value, spec) & _UINT_MASK)
    if spec in "xX":
        digits = format(_as_int(value, spec) & _UINT_MASK, "x")
        return digits.upper() if spec == "X" else digits
    # spec == "p"
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return "0x" + format(address & _POINTER_MASK, "x")


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled from ``args``.

    Integers are taken as 32-bit C ints: ``%d`` and ``%i`` wrap to signed,
    ``%u``, ``%x`` and ``%X`` to unsigned. ``%s`` of None gives ``(null)``
    and ``%p`` of None or 0 gives ``(nil)``. An unknown conversion produces
    nothing and consumes no argument; a lone trailing ``%`` is dropped.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)