"""A singly linked list of nodes carrying content and a rank index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell: its content, the next cell and a rank index."""

    content: Any
    next: Optional["Node"] = None
    index: int = 0


class LinkedList:
    """Singly linked list with append, prepend, map and clear operations."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def add_back(self, content: Any) -> Node:
        """Append content at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def add_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        node = Node(content, next=self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, passing each content to delete first if given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None
        self._tail = None
        self._size = 0

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding func applied to every content."""
        return LinkedList(func(content) for content in self)

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes front to back."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.content