"""Exception classes for singlylinked."""


class LinkedListError(Exception):
    """Base exception for all singlylinked errors."""


class InvalidIndexError(LinkedListError, IndexError):
    """Raised when a negative position is passed to LinkedList.insert()."""
