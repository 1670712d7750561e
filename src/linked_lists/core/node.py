"""
Node container for the singly linked list.
"""

from __future__ import annotations

from typing import Generic, Optional

from .types import T


class Node(Generic[T]):
    """
    A node holds a value of type T and a reference
    to the node that follows it, if any.
    """

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional[Node[T]] = None) -> None:
        self.value: T = value
        self.next: Optional[Node[T]] = next

    def __repr__(self) -> str:
        # Only peek at the successor so long chains never recurse
        return f"Node(value={self.value!r}, next={getattr(self.next, 'value', None)!r})"
