"""String helpers: number conversion, splitting, searching and slicing.

Positions are returned as indices into the string, and ``None`` stands
for "not found". A NUL search character matches the end of the string,
the way a terminator would.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

from ftkit.chars import is_digit, is_space

LONG_MAX = 2**63 - 1


class NumericError(ValueError):
    """Raised when text is not a decimal integer that fits in a signed 64-bit long."""


def _require_char(ch: str) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError("expected a single character")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def parse_long(text: str) -> int:
    """Parse a decimal integer after optional leading whitespace and one sign.

    Everything after the sign must be a digit. An empty digit run gives 0.
    Raises NumericError on any other character, and when the magnitude
    does not fit in a signed 64-bit long.
    """
    rest = text.lstrip("".join(chr(code) for code in range(9, 14)) + " ")
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    magnitude = 0
    for ch in rest:
        if not is_digit(ch):
            raise NumericError(f"numeric argument required: {text!r}")
        magnitude = magnitude * 10 + (ord(ch) - ord("0"))
        if magnitude > LONG_MAX:
            raise NumericError(f"value out of range: {text!r}")
    return sign * magnitude


def itoa(n: int) -> str:
    """Decimal representation of ``n``, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _require_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, ch: str) -> Optional[int]:
    """Index of the first ``ch`` in ``text``; ``len(text)`` for NUL; else None."""
    _require_char(ch)
    if ch == "\0":
        index = text.find(ch)
        return len(text) if index < 0 else index
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> Optional[int]:
    """Index of the last ``ch`` in ``text``; ``len(text)`` for NUL; else None."""
    _require_char(ch)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one counts as absent, both missing gives None."""
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every item of ``chars`` in place with ``func(index, char)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when they match, otherwise the difference of the code points
    of the first differing pair, a string's end counting as code 0.
    """
    _require_non_negative("n", n)
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    _require_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]


__all__ = [
    "NumericError",
    "is_space",
    "itoa",
    "parse_long",
    "split",
    "strchr",
    "striteri",
    "strjoin",
    "strmapi",
    "strncmp",
    "strnstr",
    "strrchr",
    "strtrim",
    "substr",
]