"""Core linked list components."""

from .node import Node
from .singly_linked_list import SinglyLinkedList

__all__ = ["Node", "SinglyLinkedList"]
