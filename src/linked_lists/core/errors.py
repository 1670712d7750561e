"""Exception hierarchy for linked lists.

Defines all custom exceptions raised by the package.
"""

from __future__ import annotations


class LinkedListError(Exception):
    """Base exception for all linked list errors."""
    pass


class IndexOutOfBoundsError(LinkedListError, IndexError):
    """Raised when an index does not address a node in the list."""

    def __init__(self, index: int, length: int, message: str | None = None) -> None:
        self.index = index
        self.length = length
        if message is None:
            message = f"index {index} out of bounds for list of length {length}"
        super().__init__(message)


class EmptyListError(IndexOutOfBoundsError):
    """Raised when reading or removing from an empty list."""

    def __init__(self, index: int = 0, operation: str = "operation") -> None:
        super().__init__(index, 0, f"{operation} on empty list")
        self.operation = operation
