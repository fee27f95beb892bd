"""Selection Helpers — extreme-value keys, head/tail slices and value sorting.

Invariants:
    - All helpers preserve original keys
    - min_value_key / max_value_key ignore None values and return the FIRST key
      holding the extreme value; empty input returns None
    - sort_values takes a KeyFn or a Comparator, never both

Design Decisions:
    - sort_values(key=...) vs sort_values(comparator=...) replaces guessing the
      callback shape from its parameter count (ADR: explicit callback shapes)
    - last_x keeps only a count-sized deque: works on one-shot generators
"""

from collections import deque
from functools import cmp_to_key
from itertools import islice
from typing import Any

from arrkit.core.errors import InvalidArgumentError
from arrkit.core.ordered_map import iter_pairs, select
from arrkit.core.types import Comparator, KeyFn, PairSource, Predicate


def min_value_key(source: PairSource) -> Any:
    """Key of the smallest non-None value, None when there is none."""
    return _extreme_key(source, lambda candidate, best: candidate < best)


def max_value_key(source: PairSource) -> Any:
    """Key of the largest non-None value, None when there is none."""
    return _extreme_key(source, lambda candidate, best: candidate > best)


def _extreme_key(source: Any, beats) -> Any:
    best_key, best = None, None
    for key, value in iter_pairs(source):
        if value is None:
            continue
        if best is None or beats(value, best):
            best_key, best = key, value
    return best_key


def first_x(source: PairSource, count: int = 1, *, where: Predicate | None = None) -> dict:
    """First `count` pairs (optionally only those passing `where`)."""
    _check_count(count)
    return dict(islice(select(source, where=where), count))


def last_x(source: PairSource, count: int = 1, *, where: Predicate | None = None) -> dict:
    """Last `count` pairs, in source order."""
    _check_count(count)
    if count == 0:
        return {}
    return dict(deque(select(source, where=where), maxlen=count))


def sort_values(
    source: PairSource,
    *,
    key: KeyFn | None = None,
    comparator: Comparator | None = None,
    descending: bool = False,
) -> dict:
    """Sort pairs by value, keys preserved. Stable for equal values."""
    if key is not None and comparator is not None:
        raise InvalidArgumentError(
            "sort_values takes key or comparator, not both", "comparator",
        )
    if comparator is not None:
        sort_key = cmp_to_key(lambda left, right: comparator(left[1], right[1]))
    elif key is not None:
        sort_key = lambda kv: key(kv[1])
    else:
        sort_key = lambda kv: kv[1]
    return dict(sorted(iter_pairs(source), key=sort_key, reverse=descending))


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidArgumentError(
            f"count must be a non-negative integer, got {count!r}", "count",
        )
