"""Protocol definitions for linked list components."""

from .positional_list import PositionalList

__all__ = ["PositionalList"]
