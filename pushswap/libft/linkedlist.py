"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    content: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.append(item)

    def append(self, content: T) -> None:
        """Add content at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, content: T) -> None:
        """Add content at the front of the list."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def last(self) -> T:
        """Return the content of the last element."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def map(self, f: Callable[[T], U]) -> "LinkedList[U]":
        """Return a new list holding f applied to every element, in order."""
        return LinkedList(f(content) for content in self)

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Empty the list, passing each element to delete from last to first."""
        if delete is not None:
            for content in reversed(list(self)):
                delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call f on every element, front to back."""
        for content in self:
            f(content)