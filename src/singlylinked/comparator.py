"""Pluggable three-way comparison strategy."""

from typing import Any, Generic, TypeVar

from singlylinked.types import CompareFunction

T = TypeVar("T")


class Comparator(Generic[T]):
    """
    Wraps a three-way comparison function and derives predicates from it.

    The function returns a negative number when ``a < b``, zero when the
    values are equal and a positive number when ``a > b``. Every predicate
    makes exactly one call to it.
    """

    __slots__ = ("_compare",)

    def __init__(self, compare_function: CompareFunction[T] | None = None) -> None:
        """
        Initialize the comparator.

        Args:
            compare_function: Three-way comparison callable. Defaults to
                default_compare_function, which relies on == and >.
        """
        self._compare: CompareFunction[T] = (
            compare_function if compare_function is not None else self.default_compare_function
        )

    @staticmethod
    def default_compare_function(a: Any, b: Any) -> int:
        """Compare with native equality and ordering."""
        if a == b:
            return 0
        return 1 if a > b else -1

    def compare(self, a: T, b: T) -> int:
        """Return the raw three-way comparison result."""
        return self._compare(a, b)

    __call__ = compare

    def equal(self, a: T, b: T) -> bool:
        return self._compare(a, b) == 0

    def less_than(self, a: T, b: T) -> bool:
        return self._compare(a, b) < 0

    def greater_than(self, a: T, b: T) -> bool:
        return self._compare(a, b) > 0

    def less_than_or_equal(self, a: T, b: T) -> bool:
        return self._compare(a, b) <= 0

    def greater_than_or_equal(self, a: T, b: T) -> bool:
        return self._compare(a, b) >= 0

    def reverse(self) -> "Comparator[T]":
        """Return a new comparator with the opposite ordering. Does not mutate self."""
        original = self._compare
        return Comparator(lambda a, b: -original(a, b))
