"""Conversion between decimal text and machine-sized integers."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a signed integer of the given width, two's complement."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(text: str) -> int:
    """Read optional leading whitespace, one sign and a run of digits."""
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    negative = False
    if position < length and text[position] in "+-":
        negative = text[position] == "-"
        position += 1
    number = 0
    while position < length and "0" <= text[position] <= "9":
        number = number * 10 + (ord(text[position]) - ord("0"))
        position += 1
    return -number if negative else number


def atoi(text: str) -> int:
    """Parse the leading integer of text as a 32-bit signed value.

    Parsing stops at the first character that is not a digit; text with no
    digits gives 0. Values past the 32-bit range wrap around.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Parse the leading integer of text as a 64-bit signed value.

    Parsing stops at the first character that is not a digit; text with no
    digits gives 0. Values past the 64-bit range wrap around.
    """
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of n."""
    return str(int(n))