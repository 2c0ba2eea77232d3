"""Node cell for the singly-linked list."""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A node in the singly-linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "Node[T] | None" = None) -> None:
        self.value = value
        self.next = next

    def to_string(self, formatter: Callable[[T], str] | None = None) -> str:
        """Render the node's value with str() or the given formatter."""
        if formatter is not None:
            return formatter(self.value)
        return str(self.value)

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
