"""Ordered Map Substrate — tests for pair iteration, mapping views and key order.

Tests cover:
    - iter_pairs accepts mappings, pair lists, enumerate and generators
    - malformed sources raise InvalidArgumentError
    - select filters on the original value before transforming
    - key_order is total over mixed int/str keys
"""

import pytest

from arrkit.core.errors import InvalidArgumentError
from arrkit.core.ordered_map import (
    as_mapping,
    is_container,
    iter_pairs,
    select,
    sort_keys,
    sorted_items,
)


# ─── iter_pairs ──────────────────────────────────────────────────

def test_iter_pairs_mapping():
    assert list(iter_pairs({"a": 1, "b": 2})) == [("a", 1), ("b", 2)]


def test_iter_pairs_list_of_pairs():
    assert list(iter_pairs([(0, "x"), [1, "y"]])) == [(0, "x"), (1, "y")]


def test_iter_pairs_enumerate():
    assert list(iter_pairs(enumerate("ab"))) == [(0, "a"), (1, "b")]


def test_iter_pairs_rejects_non_pairs():
    with pytest.raises(InvalidArgumentError) as exc:
        list(iter_pairs([(0, 1), 5]))
    assert "#1" in exc.value.message


@pytest.mark.parametrize("source", [42, "ab", b"ab", None])
def test_iter_pairs_rejects_scalars(source):
    with pytest.raises(InvalidArgumentError):
        list(iter_pairs(source))


# ─── as_mapping / is_container ───────────────────────────────────

def test_as_mapping():
    assert as_mapping({"a": 1}) == {"a": 1}
    assert as_mapping(["x", "y"]) == {0: "x", 1: "y"}
    assert as_mapping(("x",)) == {0: "x"}
    assert as_mapping("xy") is None
    assert as_mapping(None) is None


def test_is_container():
    assert is_container([]) and is_container({}) and is_container(())
    assert not is_container("abc")
    assert not is_container({1, 2})


# ─── select ──────────────────────────────────────────────────────

def test_select_filters_then_transforms():
    pairs = select({"a": 1, "b": 2, "c": 3}, transform=lambda v: v * 10, where=lambda v: v != 2)
    assert list(pairs) == [("a", 10), ("c", 30)]


def test_select_without_callbacks_is_identity():
    assert list(select([("k", None)])) == [("k", None)]


# ─── key order ───────────────────────────────────────────────────

def test_sort_keys_numbers_before_strings():
    assert sort_keys(["b", 2, "a", 0, 1.5]) == [0, 1.5, 2, "a", "b"]


def test_sort_keys_other_types_last():
    assert sort_keys([("t",), "a", 1]) == [1, "a", ("t",)]


def test_sorted_items():
    assert sorted_items({"b": 1, 0: 2, "a": 3}) == [(0, 2), ("a", 3), ("b", 1)]
