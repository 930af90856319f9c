"""A singly linked sequence with explicit release hooks.

Removal operations accept an optional ``release`` callable, which is run
on every removed item that is not None, so that resources held by items
can be given back as they leave the list.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Release = Optional[Callable[[Any], None]]


@dataclass
class _Node(Generic[T]):
    content: T
    next: Optional["_Node[T]"] = None


def _release(release: Release, item: Any) -> None:
    if release is not None and item is not None:
        release(item)


class LinkedList(Generic[T]):
    """A singly linked list keeping pointers to both ends."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.append(item)

    def push_front(self, item: T) -> None:
        """Insert ``item`` before the first element."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def append(self, item: T) -> None:
        """Add ``item`` after the last element."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> T:
        """Return the last element; raise IndexError when the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def remove_first(self, release: Release = None) -> T:
        """Unlink the first element, release it and return it."""
        if self._head is None:
            raise IndexError("remove_first() on an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        _release(release, node.content)
        return node.content

    def clear(self, release: Release = None) -> None:
        """Remove every element in order, releasing each one."""
        while self._head is not None:
            self.remove_first(release)

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every element in order."""
        for item in self:
            func(item)

    def map(self, func: Callable[[T], U], release: Release = None) -> "LinkedList[U]":
        """Return a new list of ``func(item)`` for every element.

        If ``func`` raises, the results built so far are released and the
        exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for item in self:
                result.append(func(item))
        except BaseException:
            result.clear(release)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"