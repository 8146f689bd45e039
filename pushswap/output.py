"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os


def _write(fd: int, text: str) -> None:
    data = text.encode("utf-8")
    while data:
        written = os.write(fd, data)
        data = data[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write one character to fd."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(fd, c)


def putstr_fd(text: str, fd: int) -> None:
    """Write a string to fd."""
    _write(fd, text)


def putendl_fd(text: str, fd: int) -> None:
    """Write a string followed by a newline to fd."""
    _write(fd, text + "\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of n to fd."""
    _write(fd, str(int(n)))