"""Integration tests for the python -m linked_lists demo driver."""

import pytest

from linked_lists.__main__ import main


def test_default_demo_reverses_seed_values(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["[10, 5, 16]", "[16, 5, 10]"]


def test_values_only_prints_once(capsys):
    assert main(["a", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == ["['a', 2]"]


def test_insert_remove_reverse(capsys):
    code = main(["1", "2", "3", "4", "--insert", "1:99", "--remove", "2", "--reverse"])
    assert code == 0
    out = capsys.readouterr().out.splitlines()
    # [1, 99, 2, 3, 4] -> remove after index 2 -> [1, 99, 2, 4] -> reversed
    assert out == ["[1, 2, 3, 4]", "[4, 2, 99, 1]"]


def test_out_of_range_remove_exits_with_error(capsys):
    assert main(["1", "2", "--remove", "1"]) == 2
    out = capsys.readouterr().out
    assert "Error: no node after index 1 in list of length 2" in out


def test_malformed_insert_is_rejected():
    with pytest.raises(SystemExit) as exc_info:
        main(["1", "--insert", "nope"])
    assert exc_info.value.code == 2
