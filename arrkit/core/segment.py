"""Segmentation — split an ordered map at a boundary, or group it by label.

Invariants:
    - Keys are preserved in every output part; relative order is source order
    - split_at takes exactly one condition; zero or several raise InvalidArgumentError
    - split_at's second part starts at the first matching element (inclusive)
    - partition drops elements labelled None; bool labels become 0 / 1
    - partition groups are ordered by key_order of their labels

Design Decisions:
    - where (value) and where_item (key, value) are separate parameters instead of
      inspecting the callback's arity (ADR: explicit callback shapes)
    - value= / key= match on type and equality, so 1 does not match True or 1.0
"""

from collections.abc import Iterable
from typing import Any

from arrkit.core.errors import InvalidArgumentError
from arrkit.core.ordered_map import iter_pairs, sorted_items
from arrkit.core.types import UNSET, ItemPredicate, KeyFn, PairSource, Predicate


# ─── split_at ────────────────────────────────────────────────────

def split_at(
    data: PairSource,
    *,
    where: Predicate | None = None,
    where_item: ItemPredicate | None = None,
    first: int | None = None,
    last: int | None = None,
    value: Any = UNSET,
    key: Any = UNSET,
) -> tuple[dict, dict]:
    """Split into (items before the boundary, boundary item and the rest).

        >>> split_at({"a": 1, "b": 2, "c": 3}, value=2)
        ({'a': 1}, {'b': 2, 'c': 3})
        >>> split_at([(0, "x"), (1, "y"), (2, "z")], last=1)
        ({0: 'x', 1: 'y'}, {2: 'z'})
    """
    given = {
        "where": where is not None,
        "where_item": where_item is not None,
        "first": first is not None,
        "last": last is not None,
        "value": value is not UNSET,
        "key": key is not UNSET,
    }
    chosen = [name for name, present in given.items() if present]
    if len(chosen) != 1:
        raise InvalidArgumentError(
            f"split_at takes exactly one condition, got {chosen or 'none'}",
            "condition",
        )

    items = list(iter_pairs(data))
    if first is not None or last is not None:
        size = first if first is not None else last
        _check_size(size, chosen[0])
        cut = size if first is not None else max(len(items) - size, 0)
        return dict(items[:cut]), dict(items[cut:])

    if value is not UNSET:
        match = lambda k, v: _same(v, value)
    elif key is not UNSET:
        match = lambda k, v: _same(k, key)
    elif where is not None:
        match = lambda k, v: where(v)
    else:
        match = where_item

    for position, (k, v) in enumerate(items):
        if match(k, v):
            return dict(items[:position]), dict(items[position:])
    return dict(items), {}


def _same(candidate: Any, target: Any) -> bool:
    return type(candidate) is type(target) and candidate == target


def _check_size(size: Any, argument: str) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidArgumentError(
            f"{argument} must be a non-negative integer, got {size!r}", argument,
        )


# ─── partition ───────────────────────────────────────────────────

def partition(data: PairSource, by: KeyFn | str) -> dict[Any, dict]:
    """Group elements by label: `by(value)` or `value[by]` for a field name.

        >>> partition(enumerate(range(1, 7)), lambda v: v % 3)
        {0: {2: 3, 5: 6}, 1: {0: 1, 3: 4}, 2: {1: 2, 4: 5}}
    """
    if isinstance(by, str):
        field = by
        label_of = lambda v: v.get(field) if hasattr(v, "get") else None
    elif callable(by):
        label_of = by
    else:
        raise InvalidArgumentError(
            f"by must be a callable or a field name, got {type(by).__name__}", "by",
        )

    groups: dict[Any, dict] = {}
    for k, v in iter_pairs(data):
        label = label_of(v)
        if label is None:
            continue
        if isinstance(label, bool):
            label = int(label)
        groups.setdefault(label, {})[k] = v
    return dict(sorted_items(groups))


def partition_by_keys(data: PairSource, keys: Iterable[Any]) -> dict[int, dict]:
    """Split into {0: keys not listed, 1: keys listed}; empty groups omitted."""
    wanted = set(keys)
    groups: dict[int, dict] = {}
    for k, v in iter_pairs(data):
        groups.setdefault(1 if k in wanted else 0, {})[k] = v
    return dict(sorted(groups.items()))
