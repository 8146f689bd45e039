"""Turning command-line arguments into a validated list of integers."""

from __future__ import annotations

import re
from typing import List, Sequence

from pushswap.numbers import atoi, atol
from pushswap.strings import split

INT_MIN = -2147483648
INT_MAX = 2147483647

_MAX_TOKEN_LENGTH = 12
_NUMERIC = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the program's arguments cannot be used.

    ``report`` tells whether the failure should be announced with an
    error message; a missing argument list is rejected silently.
    """

    def __init__(self, message: str = "Error", *, report: bool = True) -> None:
        super().__init__(message)
        self.report = report


def split_arguments(args: Sequence[str]) -> List[str]:
    """Return the number tokens held by the arguments (program name excluded).

    A single argument is split on spaces; several arguments are taken as
    they are. No arguments at all raise a silent InputError.
    """
    if not args:
        raise InputError("no arguments", report=False)
    if len(args) == 1:
        return split(args[0], " ")
    return list(args)


def is_numeric(text: str) -> bool:
    """Return True for an optional sign followed by one or more digits."""
    return _NUMERIC.fullmatch(text) is not None


def in_bounds(tokens: Sequence[str]) -> bool:
    """Return True if every token fits in a signed 32-bit integer."""
    for token in tokens:
        length = len(token)
        if length > _MAX_TOKEN_LENGTH:
            body = token[1:] if token[0] in "+-" else token
            length -= len(body) - len(body.lstrip("0"))
        if length > _MAX_TOKEN_LENGTH:
            return False
        if not INT_MIN <= atol(token) <= INT_MAX:
            return False
    return True


def all_unique(tokens: Sequence[str]) -> bool:
    """Return True if no two tokens stand for the same number."""
    values = [atoi(token) for token in tokens]
    return len(set(values)) == len(values)


def check_tokens(tokens: Sequence[str]) -> None:
    """Raise InputError unless the tokens are distinct in-range integers."""
    if not tokens:
        raise InputError("no numbers given")
    for token in tokens:
        if not is_numeric(token):
            raise InputError(f"not a number: {token!r}")
    if not in_bounds(tokens):
        raise InputError("number out of range")
    if not all_unique(tokens):
        raise InputError("duplicate number")


def parse_numbers(args: Sequence[str]) -> List[int]:
    """Split, validate and convert the arguments to integers."""
    tokens = split_arguments(args)
    check_tokens(tokens)
    return [atol(token) for token in tokens]