"""String helpers with C-library semantics expressed on Python strings.

Functions that would return a pointer into a string return an index
instead, or None where nothing was found.
"""

from __future__ import annotations

from typing import Callable, MutableSequence


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return str(text)


def strchr(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``.

    Searching for ``"\\0"`` finds the terminator, at ``len(text)``.
    """
    _single_char(c)
    if c == "\0":
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``; ``"\\0"`` gives ``len(text)``."""
    _single_char(c)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first differing pair, a string's end
    counting as code 0, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for i in range(min(n, max(len(first), len(second)))):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; the copy was
    truncated when that length is not less than ``size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have.
    When ``size`` does not exceed ``len(dst)`` nothing is appended and the
    length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if not isinstance(text, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be strings")
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    _single_char(sep)
    return [word for word in text.split(sep) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each item, in place.

    A string returned by ``func`` replaces the character; None leaves it.
    The same sequence is returned.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars