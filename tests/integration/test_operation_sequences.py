"""Mixed-operation scenarios checked against a plain Python list."""

import random

import pytest

from linked_lists import IndexOutOfBoundsError, SinglyLinkedList


def _apply(rng, linked, model):
    op = rng.choice(["append", "prepend", "insert", "remove", "reverse", "pop_left"])
    value = rng.randint(0, 1000)

    if op == "append":
        linked.append(value)
        model.append(value)
    elif op == "prepend":
        linked.prepend(value)
        model.insert(0, value)
    elif op == "insert":
        index = rng.randint(-2, len(model) + 2)
        linked.insert(index, value)
        model.insert(min(max(index, 0), len(model)), value)
    elif op == "remove":
        index = rng.randint(-1, len(model))
        if 0 <= index and index + 1 < len(model):
            linked.remove(index)
            del model[index + 1]
        else:
            with pytest.raises(IndexOutOfBoundsError):
                linked.remove(index)
    elif op == "reverse":
        assert linked.reverse() == model[::-1]
        model.reverse()
    elif op == "pop_left":
        if model:
            assert linked.pop_left() == model.pop(0)


@pytest.mark.parametrize("seed", range(20))
def test_random_operations_match_model(seed, check_invariants):
    rng = random.Random(seed)
    linked = SinglyLinkedList()
    model = []

    for _ in range(200):
        _apply(rng, linked, model)
        check_invariants(linked)
        assert linked.to_list() == model


def test_seeded_list_usage_scenario(check_invariants):
    linked = SinglyLinkedList(10)
    linked.append(5)
    linked.append(16)
    linked.prepend(1)
    linked.insert(2, 99)
    assert linked.print_list() == [1, 10, 99, 5, 16]

    linked.remove(2)
    assert linked.print_list() == [1, 10, 99, 16]

    assert linked.reverse() == [16, 99, 10, 1]
    check_invariants(linked)
