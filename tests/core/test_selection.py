"""Tests for min/max value keys, first_x / last_x and sort_values."""

import pytest

from arrkit.core.errors import InvalidArgumentError
from arrkit.core.selection import (
    first_x,
    last_x,
    max_value_key,
    min_value_key,
    sort_values,
)


# ─── min_value_key / max_value_key ───────────────────────────────

def test_min_value_key():
    assert min_value_key({"a": 3, "b": 1, "c": 2}) == "b"


def test_max_value_key():
    assert max_value_key({"a": 3, "b": 1, "c": 9}) == "c"


def test_extreme_keys_pick_first_on_ties():
    data = {"a": 1, "b": 5, "c": 1, "d": 5}
    assert min_value_key(data) == "a"
    assert max_value_key(data) == "b"


def test_extreme_keys_ignore_none():
    assert min_value_key({"a": None, "b": 4}) == "b"
    assert max_value_key({"a": None, "b": 4}) == "b"


def test_extreme_keys_empty_returns_none():
    assert min_value_key({}) is None
    assert max_value_key([]) is None


def test_extreme_keys_accept_enumerate():
    assert min_value_key(enumerate([4, 0, 7])) == 1


# ─── first_x / last_x ────────────────────────────────────────────

def test_first_x_keeps_keys():
    assert first_x({"a": 1, "b": 2, "c": 3}, 2) == {"a": 1, "b": 2}


def test_first_x_with_where():
    assert first_x(enumerate(range(10)), 2, where=lambda v: v % 4 == 3) == {3: 3, 7: 7}


def test_first_x_stops_early_on_generators():
    consumed = []

    def gen():
        for i in range(100):
            consumed.append(i)
            yield i, i

    first_x(gen(), 3)
    assert len(consumed) == 3


def test_last_x_keeps_source_order():
    assert last_x({"a": 1, "b": 2, "c": 3}, 2) == {"b": 2, "c": 3}


def test_last_x_with_where():
    assert last_x(enumerate(range(10)), 2, where=lambda v: v % 2 == 0) == {6: 6, 8: 8}


def test_last_x_zero():
    assert last_x({"a": 1}, 0) == {}


def test_first_x_rejects_negative_count():
    with pytest.raises(InvalidArgumentError):
        first_x({"a": 1}, -1)


# ─── sort_values ─────────────────────────────────────────────────

def test_sort_values_default_ascending_keys_kept():
    assert list(sort_values({"a": 3, "b": 1, "c": 2}).items()) == [("b", 1), ("c", 2), ("a", 3)]


def test_sort_values_descending():
    assert list(sort_values({"a": 3, "b": 1, "c": 2}, descending=True)) == ["a", "c", "b"]


def test_sort_values_by_key_fn():
    rows = {"x": {"n": 2}, "y": {"n": 1}}
    assert list(sort_values(rows, key=lambda row: row["n"])) == ["y", "x"]


def test_sort_values_by_comparator():
    by_length = lambda left, right: len(left) - len(right)
    result = sort_values({"a": "ccc", "b": "a", "c": "bb"}, comparator=by_length)
    assert list(result) == ["b", "c", "a"]


def test_sort_values_is_stable():
    assert list(sort_values({"a": 1, "b": 0, "c": 1})) == ["b", "a", "c"]


def test_sort_values_rejects_key_and_comparator():
    with pytest.raises(InvalidArgumentError):
        sort_values({"a": 1}, key=abs, comparator=lambda a, b: 0)
