"""Singly-linked list with a pluggable comparator."""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from singlylinked.comparator import Comparator
from singlylinked.errors import InvalidIndexError
from singlylinked.node import Node
from singlylinked.types import CompareFunction, Predicate

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Marks "no value supplied" so that None stays searchable
_MISSING: Any = object()


class LinkedList(Generic[T]):
    """
    Singly-linked list that owns its node chain through ``head``.

    ``tail`` is a shortcut to the last node for O(1) append. All equality
    decisions go through ``compare``.
    """

    def __init__(
        self,
        compare_function: CompareFunction[T] | Comparator[T] | None = None,
    ) -> None:
        """
        Initialize an empty list.

        Args:
            compare_function: Three-way comparison callable or an existing
                Comparator. Defaults to native equality and ordering.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        if isinstance(compare_function, Comparator):
            self.compare: Comparator[T] = compare_function
        else:
            self.compare = Comparator(compare_function)

    @property
    def head(self) -> Node[T] | None:
        """First node, or None when empty."""
        return self._head

    @property
    def tail(self) -> Node[T] | None:
        """Last node, or None when empty."""
        return self._tail

    def prepend(self, value: T) -> "LinkedList[T]":
        """Add value at the head. O(1)."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return self

    def append(self, value: T) -> "LinkedList[T]":
        """Add value at the tail. O(1)."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return self

    def insert(self, value: T, index: int) -> "LinkedList[T]":
        """
        Insert value so that it ends up at position ``index``.

        An index past the end of the list leaves the list unchanged.

        Raises:
            InvalidIndexError: If index is negative
            TypeError: If index is not an int
        """
        if not isinstance(index, int):
            raise TypeError(f"index must be an int, not {type(index).__name__}")
        if index < 0:
            raise InvalidIndexError(f"index must be non-negative, got {index}")
        if index == 0:
            return self.prepend(value)

        current = self._head
        position = 0
        while current is not None:
            if position == index - 1:
                node = Node(value, current.next)
                current.next = node
                if node.next is None:
                    self._tail = node
                self._size += 1
                return self
            current = current.next
            position += 1

        logger.debug("insert at index %d ignored, list has %d nodes", index, self._size)
        return self

    def delete(self, value: T) -> Node[T] | None:
        """
        Remove every node equal to value.

        Returns:
            The last node removed, or None if nothing matched
        """
        deleted: Node[T] | None = None
        removed = 0

        # Leading run of matches
        while self._head is not None and self.compare.equal(self._head.value, value):
            deleted = self._head
            self._head = deleted.next
            deleted.next = None
            removed += 1

        # Remaining matches; current stops on the last surviving node
        current = self._head
        if current is not None:
            while current.next is not None:
                candidate = current.next
                if self.compare.equal(candidate.value, value):
                    current.next = candidate.next
                    candidate.next = None
                    deleted = candidate
                    removed += 1
                else:
                    current = candidate

        self._tail = current
        self._size -= removed
        if removed > 1:
            logger.debug("delete removed %d nodes equal to %r", removed, value)
        return deleted

    def find(
        self,
        value: T = _MISSING,
        *,
        predicate: Predicate[T] | None = None,
    ) -> Node[T] | None:
        """
        Return the first node matching predicate, or equal to value.

        The predicate takes precedence when both are given. With neither,
        returns None.
        """
        if predicate is None and value is _MISSING:
            return None

        current = self._head
        while current is not None:
            if predicate is not None:
                if predicate(current.value):
                    return current
            elif self.compare.equal(current.value, value):
                return current
            current = current.next
        return None

    def delete_head(self) -> Node[T] | None:
        """Remove and return the first node. O(1)."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node

    def delete_tail(self) -> Node[T] | None:
        """Remove and return the last node. O(n)."""
        node = self._tail
        if self._head is None or node is None:
            return None

        if self._head is node:
            self._head = None
            self._tail = None
        else:
            current: Node[T] | None = self._head
            while current is not None and current.next is not node:
                current = current.next
            if current is None:
                raise RuntimeError("Unexpected tail not reachable from head")
            current.next = None
            self._tail = current
        self._size -= 1
        return node

    def reverse(self) -> "LinkedList[T]":
        """Reverse the list in place."""
        previous: Node[T] | None = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous
        return self

    def from_sequence(self, values: Iterable[T]) -> "LinkedList[T]":
        """Append each value in order."""
        for value in values:
            self.append(value)
        return self

    def to_sequence(self) -> list[T]:
        """Return the values from head to tail as a new list."""
        return list(self)

    def to_display_string(self, formatter: Callable[[T], str] | None = None) -> str:
        """Comma-joined rendering of the values, repr() unless a formatter is given."""
        render = formatter if formatter is not None else repr
        return ", ".join(render(value) for value in self)

    def __iter__(self) -> Iterator[T]:
        """Yield values from head to tail."""
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"LinkedList({self.to_sequence()!r})"

    def __str__(self) -> str:
        return self.to_display_string()
