"""
A singly linked list with positional mutation and in-place reversal.

Time Complexity:
append/prepend: O(1), the tail is tracked so appending never scans
insert/traverse_to_index/remove: O(index)
to_list/reverse: O(n)

Invariants:
    - length equals the number of nodes reachable from head
    - tail.next is always None
    - head and tail are both None exactly when length == 0
    - traversal from head terminates after exactly length steps
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, Optional

from .errors import EmptyListError, IndexOutOfBoundsError
from .node import Node
from .types import T

logger = logging.getLogger(__name__)


class SinglyLinkedList(Generic[T]):
    """
    SinglyLinkedList owns a chain of Node[T] containers.

    Callers hand in and read back values; nodes are exposed
    read-only through head, tail and traverse_to_index.
    Mutating operations return the list itself so calls chain.
    """

    def __init__(self, *values: T) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._length: int = 0
        for value in values:
            self.append(value)

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> SinglyLinkedList[T]:
        """Builds a list holding the values in iteration order."""
        result: SinglyLinkedList[T] = cls()
        for value in values:
            result.append(value)
        return result

    # -----------------------------
    # Accessors
    # -----------------------------
    @property
    def head(self) -> Optional[Node[T]]:
        return self._head

    @property
    def tail(self) -> Optional[Node[T]]:
        return self._tail

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __repr__(self) -> str:
        values = " -> ".join(repr(v) for v in self)
        return f"SinglyLinkedList([{values}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SinglyLinkedList):
            return NotImplemented
        return self._length == other._length and self.to_list() == other.to_list()

    def is_empty(self) -> bool:
        return self._length == 0

    # -----------------------------
    # Insertion
    # -----------------------------
    def append(self, value: T) -> SinglyLinkedList[T]:
        """Adds value after the current tail. O(1)."""
        new_node = Node(value)
        if self._tail is None:
            self._head = new_node
        else:
            self._tail.next = new_node
        self._tail = new_node
        self._length += 1
        return self

    def prepend(self, value: T) -> SinglyLinkedList[T]:
        """Adds value before the current head. O(1)."""
        new_node = Node(value, next=self._head)
        self._head = new_node
        if self._tail is None:
            self._tail = new_node
        self._length += 1
        return self

    def insert(self, index: int, value: T) -> SinglyLinkedList[T]:
        """
        Inserts value so that it ends up at position index,
        shifting the following values back by one.
        Indices at or below zero prepend, indices at or past
        the end append; this never raises for a range problem.
        """
        self._check_index_type(index)
        if index <= 0:
            return self.prepend(value)
        if index >= self._length:
            return self.append(value)

        # The leader is the node that will precede the new one
        leader = self.traverse_to_index(index - 1)
        leader.next = Node(value, next=leader.next)
        self._length += 1
        return self

    # -----------------------------
    # Lookup and removal
    # -----------------------------
    def traverse_to_index(self, index: int) -> Node[T]:
        """
        Returns the node at the 0-based index.
        Raises IndexOutOfBoundsError unless 0 <= index < length.
        """
        self._check_index_type(index)
        if self._length == 0:
            raise EmptyListError(index, "traverse_to_index")
        if not 0 <= index < self._length:
            raise IndexOutOfBoundsError(index, self._length)

        current = self._head
        for _ in range(index):
            assert current is not None
            current = current.next
        assert current is not None
        return current

    def remove(self, index: int) -> SinglyLinkedList[T]:
        """
        Removes the node that follows position index, i.e. the
        node at index + 1. The head cannot be removed this way,
        use pop_left for that.
        Raises IndexOutOfBoundsError unless 0 <= index < length - 1.
        """
        self._check_index_type(index)
        if self._length == 0:
            raise EmptyListError(index, "remove")
        if index < 0 or index + 1 >= self._length:
            raise IndexOutOfBoundsError(
                index,
                self._length,
                f"no node after index {index} in list of length {self._length}",
            )

        leader = self.traverse_to_index(index)
        unwanted = leader.next
        assert unwanted is not None
        leader.next = unwanted.next
        if unwanted is self._tail:
            self._tail = leader
        unwanted.next = None
        self._length -= 1
        logger.debug(f"Removed node after index {index}, length={self._length}")
        return self

    def pop_left(self) -> T:
        """Removes the head node and returns its value."""
        if self._head is None:
            raise EmptyListError(0, "pop_left")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._length -= 1
        return node.value

    def clear(self) -> None:
        """Unlinks every node and leaves the list empty."""
        current = self._head
        while current is not None:
            following = current.next
            current.next = None
            current = following
        self._head = None
        self._tail = None
        logger.debug(f"Cleared list of {self._length} nodes")
        self._length = 0

    # -----------------------------
    # Materialization
    # -----------------------------
    def to_list(self) -> List[T]:
        return list(iter(self))

    def print_list(self) -> List[T]:
        """Returns the values from head to tail without mutating the list."""
        return self.to_list()

    def reverse(self) -> List[T]:
        """
        Reverses the chain in place and returns the resulting values.
        The list object itself is not returned; read head and tail
        from it afterwards to walk the reversed chain.
        """
        if self._length <= 1:
            return self.to_list()

        previous: Optional[Node[T]] = None
        current = self._head
        # The old head becomes the new tail
        self._tail = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

        logger.debug(f"Reversed list of {self._length} nodes")
        return self.to_list()

    @staticmethod
    def _check_index_type(index: object) -> None:
        # bool is an int subclass but is never a meaningful position
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"index must be an int, not {type(index).__name__}")
