"""A minimal singly linked list where new items are pushed onto the head."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    """A single link holding one value and a reference to the next node."""

    data: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list; ``add`` places the new value at the head."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self.head: Optional[Node[T]] = None
        self._size = 0
        for item in items or ():
            self.add(item)

    def add(self, data: T) -> None:
        """Push ``data`` onto the front of the list."""
        self.head = Node(data, self.head)
        self._size += 1

    def _nodes(self) -> Iterator[Node[T]]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def _node_at(self, index: int) -> Node[T]:
        if index < 0:
            raise IndexError("Index does not exist in list.")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("Index does not exist in list.")

    def get(self, index: int) -> T:
        """Return the value stored at zero-based ``index``."""
        return self._node_at(index).data

    def set(self, index: int, data: T) -> None:
        """Replace the value stored at zero-based ``index``."""
        self._node_at(index).data = data

    def clear(self) -> None:
        """Drop every node."""
        self.head = None
        self._size = 0

    def to_list(self) -> list[T]:
        """Return the values, head first, as a Python list."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        body = ",".join(str(item) for item in self)
        return f"Printing linked list:\n{body}\n"