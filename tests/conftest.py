"""Shared fixtures for linked list tests."""

import pytest

from linked_lists import SinglyLinkedList


def _check_invariants(linked: SinglyLinkedList) -> None:
    # Walk at most length + 1 steps so a cycle cannot hang the test
    count = 0
    last = None
    node = linked.head
    while node is not None and count <= linked.length:
        last = node
        node = node.next
        count += 1

    assert count == linked.length == len(linked)
    if linked.length == 0:
        assert linked.head is None
        assert linked.tail is None
    else:
        assert linked.head is not None
        assert linked.tail is last
        assert linked.tail.next is None


@pytest.fixture
def check_invariants():
    """Assert the structural invariants of a list."""
    return _check_invariants


@pytest.fixture
def empty():
    return SinglyLinkedList()


@pytest.fixture
def one_two_three():
    return SinglyLinkedList(1, 2, 3)
