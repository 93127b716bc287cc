"""ASCII character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def isalpha(c: str | int) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def isalnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: str | int, shift: int, low: int, high: int) -> str | int:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else comes back unchanged.

    A character yields a character, an integer code yields a code.
    """
    return _convert(c, -32, 97, 122)


def tolower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    return _convert(c, 32, 65, 90)


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit; with no digits the result is 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    if pos == start:
        return 0
    return sign * int(text[start:pos])


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits