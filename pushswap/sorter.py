"""Choosing and running the sequence of stack operations that sorts stack a."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, List, Sequence

from pushswap.stacks import Stacks


def rank(values: Sequence[int]) -> List[int]:
    """Replace each value by the number of values smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def is_sorted(indices: Iterable[int]) -> bool:
    """Return True if the ranks read 0, 1, 2, ... from the top."""
    return all(position == index for position, index in enumerate(indices))


def max_bits(size: int) -> int:
    """Return the number of bits needed to write size."""
    if size < 0:
        raise ValueError("size must not be negative")
    return size.bit_length()


def sort_two(stacks: Stacks, stack_name: str) -> None:
    """Order the top two elements of the named stack ascending."""
    stack = stacks.stack(stack_name)
    if stack[0] > stack[1]:
        if stack_name == "a":
            stacks.sa()
        else:
            stacks.sb()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack a of three elements."""
    a = stacks.a
    position = a.index(max(a))
    if position == 0:
        stacks.ra()
    elif position == 1:
        stacks.rra()
    if a[1] < a[0]:
        stacks.sa()


def sort_four(stacks: Stacks) -> None:
    """Sort a stack a holding the ranks 0 to 3."""
    a = stacks.a
    if a.index(0) < 2:
        if a[0] != 0:
            stacks.ra()
    else:
        while a[0] != 0:
            stacks.rra()
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack a holding the ranks 0 to 4."""
    a = stacks.a
    for _ in range(2):
        while a[0] not in (0, 4):
            stacks.ra()
        stacks.pb()
    sort_three(stacks)
    sort_two(stacks, "b")
    stacks.pa()
    stacks.pa()
    stacks.ra()


def radix_sort(stacks: Stacks) -> None:
    """Sort the ranks in stack a bit by bit, least significant first."""
    size = len(stacks.a)
    for bit in range(max_bits(size)):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def solve(values: Sequence[int]) -> List[str]:
    """Return the operations that sort values ascending on stack a."""
    stacks = Stacks(rank(values))
    size = len(stacks.a)
    if size <= 1 or is_sorted(stacks.a):
        pass
    elif size == 2:
        sort_two(stacks, "a")
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations