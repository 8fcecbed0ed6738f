"""Reading the numbers to sort from command-line words."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = "0123456789"
_SIGNS = "+-"
_WHITESPACE = " \t\n\r\f\v"


class InputError(ValueError):
    """Raised when the given words cannot form a stack."""


def split_words(text: str, separator: str = " ") -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def has_syntax_error(token: str) -> bool:
    """True unless ``token`` is an optional sign followed by ASCII digits."""
    if not token or token[0] not in _SIGNS + _DIGITS:
        return True
    if token[0] in _SIGNS and (len(token) < 2 or token[1] not in _DIGITS):
        return True
    return any(char not in _DIGITS for char in token[1:])


def parse_number(token: str) -> int:
    """Read a leading, optionally signed integer, ignoring what follows it."""
    rest = token.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] and rest[0] in _SIGNS:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda char: char in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def parse_values(tokens: Iterable[str]) -> list[int]:
    """Turn words into distinct 32-bit integers, in order."""
    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if has_syntax_error(token):
            raise InputError(f"not a number: {token!r}")
        number = parse_number(token)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError(f"out of range: {token!r}")
        if number in seen:
            raise InputError(f"duplicate: {token!r}")
        seen.add(number)
        values.append(number)
    return values