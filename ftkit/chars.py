"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer
character code. The predicates return ``bool``. The converters return
a value of the same kind as their argument.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset({9, 10, 11, 12, 13, 32})


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, which is a character or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a single character or an integer code")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError("expected a single character or an integer code")


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True when the code lies in the 7-bit range 0-127."""
    return 0 <= _code(c) <= 0x7F


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return _code(c) in _SPACE_CODES


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else as it is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _convert(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else as it is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _convert(c, code)