"""Protocol definition for a positional list."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.node import Node


@runtime_checkable
class PositionalList(Protocol):
    """Ordered container addressed by 0-based node positions."""

    @property
    def head(self) -> Node[Any] | None:
        """Return the first node, or None when empty."""
        ...

    @property
    def tail(self) -> Node[Any] | None:
        """Return the last node, or None when empty."""
        ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Any]: ...

    def append(self, value: Any) -> PositionalList:
        """Add value after the tail."""
        ...

    def prepend(self, value: Any) -> PositionalList:
        """Add value before the head."""
        ...

    def insert(self, index: int, value: Any) -> PositionalList:
        """Place value at index, clamping to prepend/append at the ends."""
        ...

    def traverse_to_index(self, index: int) -> Node[Any]:
        """Return the node at index; raise on an out-of-range index."""
        ...

    def remove(self, index: int) -> PositionalList:
        """Remove the node following index; raise if there is none."""
        ...

    def to_list(self) -> list[Any]:
        """Return all values from head to tail."""
        ...

    def reverse(self) -> list[Any]:
        """Reverse in place and return the resulting values."""
        ...
