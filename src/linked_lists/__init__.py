"""Linked lists - a singly linked list with positional mutation and in-place reversal."""

from .core.errors import (
    LinkedListError,
    IndexOutOfBoundsError,
    EmptyListError,
)
from .core.node import Node
from .core.singly_linked_list import SinglyLinkedList
from .interfaces.positional_list import PositionalList

__all__ = [
    "LinkedListError",
    "IndexOutOfBoundsError",
    "EmptyListError",
    "Node",
    "SinglyLinkedList",
    "PositionalList",
]
