"""The two stacks and the instruction set that moves numbers between them."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List


class Stacks:
    """Stacks a and b, top at the left, with a log of performed operations.

    Operations that have no effect (too few elements) are not logged.
    The combined operations log their two halves separately.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.operations: List[str] = []

    def stack(self, name: str) -> Deque[int]:
        """Return stack "a" or "b"."""
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"unknown stack {name!r}")

    def _swap(self, stack: Deque[int], name: str) -> None:
        if len(stack) < 2:
            return
        stack[0], stack[1] = stack[1], stack[0]
        self.operations.append(name)

    def _push(self, source: Deque[int], target: Deque[int], name: str) -> None:
        if not source:
            return
        target.appendleft(source.popleft())
        self.operations.append(name)

    def _rotate(self, stack: Deque[int], steps: int, name: str) -> None:
        if len(stack) < 2:
            return
        stack.rotate(steps)
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the top two elements of a."""
        self._swap(self.a, "sa")

    def sb(self) -> None:
        """Swap the top two elements of b."""
        self._swap(self.b, "sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._push(self.b, self.a, "pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._push(self.a, self.b, "pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a, -1, "ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b, -1, "rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._rotate(self.a, 1, "rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._rotate(self.b, 1, "rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.rra()
        self.rrb()