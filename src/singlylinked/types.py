"""Type definitions for singlylinked."""

from collections.abc import Callable
from typing import TypeAlias, TypeVar

# Element type stored in nodes
T = TypeVar("T")

# Three-way comparison: negative if a < b, zero if equal, positive if a > b
CompareFunction: TypeAlias = Callable[[T, T], int]

# Predicate used by LinkedList.find()
Predicate: TypeAlias = Callable[[T], bool]
