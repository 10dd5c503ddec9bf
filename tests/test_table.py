from collections import deque

import pytest
from cyclecursor.table import PreconditionViolated, TableLike, at, is_table_like, length, materialize


def test_builtin_sequences_are_table_like():
    for t in ([1, 2], (1, 2), "ab", range(2), deque([1, 2])):
        assert isinstance(t, TableLike)
    assert not isinstance({1, 2}, TableLike)


def test_mappings_are_not_table_like():
    assert is_table_like([1, 2]) and is_table_like(deque())
    assert not is_table_like({"a": 1, "b": 2})
    assert not is_table_like({0: "a", 1: "b"})
    assert not is_table_like({1, 2})


def test_at_reads_in_range():
    t = ["a", "b", "c"]
    assert length(t) == 3
    assert [at(t, i) for i in range(3)] == t


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_at_out_of_range_is_precondition_violation(index):
    with pytest.raises(PreconditionViolated):
        at(["a", "b", "c"], index)


def test_precondition_violated_is_index_error():
    with pytest.raises(IndexError):
        at([], 0)


def test_materialize():
    t = (1, 2)
    assert materialize(t) is t
    assert materialize(x * 2 for x in range(3)) == (0, 2, 4)
    assert materialize(sorted({3, 1, 2})) == (1, 2, 3)
