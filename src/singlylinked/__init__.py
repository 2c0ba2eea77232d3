"""singlylinked - Singly-linked list with a pluggable three-way comparator."""

from singlylinked.comparator import Comparator
from singlylinked.errors import InvalidIndexError, LinkedListError
from singlylinked.linkedlist import LinkedList
from singlylinked.node import Node
from singlylinked.types import CompareFunction, Predicate

__version__ = "0.0.1"

__all__ = [
    "LinkedList",
    "Node",
    "Comparator",
    "CompareFunction",
    "Predicate",
    "LinkedListError",
    "InvalidIndexError",
]
