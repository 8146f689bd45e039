"""String helpers: searching, comparison, slicing, splitting and mapping.

Positions are returned as indices into the string, or None when nothing
is found. A NUL character (``"\\0"``) stands for the end of the string,
so searching for it yields the string's length.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple

_NUL = "\0"


def _single_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _code_at(text: str, index: int) -> int:
    """Code of the character at index, or 0 past the end of the string."""
    return ord(text[index]) if index < len(text) else 0


def strlen(text: str) -> int:
    """Return the number of characters in text."""
    return len(text)


def strchr(text: str, c: str) -> Optional[int]:
    """Return the index of the first c in text, or None if absent."""
    if _single_char(c) == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Return the index of the last c in text, or None if absent."""
    if _single_char(c) == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the difference at the first mismatch."""
    for index in range(n):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0:
            return a - b
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings; return the difference at the first mismatch."""
    return strncmp(first, second, max(len(first), len(second)) + 1)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find little in the first length characters of big.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    if not little:
        return 0
    for start in range(min(len(big), length)):
        if start + len(little) > length:
            break
        if big.startswith(little, start):
            return start
    return None


def strdup(text: str) -> str:
    """Return a copy of text."""
    return "".join(text)


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of first and second."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start past the end of text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def split(text: str, delimiter: str) -> List[str]:
    """Split text on delimiter, dropping empty words."""
    _single_char(delimiter)
    return [word for word in text.split(delimiter) if word]


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length it tried to create.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    kept = min(len(dst), size)
    if kept >= size:
        return dst, kept + len(src)
    room = size - kept - 1
    return dst[:kept] + src[:room], kept + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from func(index, char) for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], str]
) -> None:
    """Replace each character of a mutable character sequence in place.

    func receives the index and the character and returns its replacement.
    """
    for index, char in enumerate(text):
        text[index] = func(index, char)