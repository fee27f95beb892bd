"""Top-K Selection — the K smallest / largest values of a pair stream, keys preserved.

Invariants:
    - Single forward pass over the source; memory bounded by count
    - None values (after transform) never enter the buffer
    - After fill-up the buffer holds the K best values seen so far
    - Result is ascending by value for BOTH top_k_min and top_k_max
    - Among equal values the evicted entry is the first one in buffer order

Design Decisions:
    - Linear threshold rescan after each replacement instead of a heap: O(n*k) worst
      case, but the buffer keeps source order so ties resolve predictably (ADR: small k)
    - Incomparable values raise TypeError from the comparison itself (no coercion)
"""

import operator
from collections.abc import Callable, Iterable
from typing import Any

from arrkit.core.errors import InvalidArgumentError
from arrkit.core.ordered_map import select
from arrkit.core.types import OrderedMap, PairSource, Predicate, Transform


def top_k_min(
    source: PairSource,
    count: int = 1,
    *,
    transform: Transform | None = None,
    where: Predicate | None = None,
) -> OrderedMap:
    """Return the `count` smallest non-None values of `source`, ascending.

    `where` filters on the original value, `transform` maps survivors before
    comparison; the result carries transformed values under original keys.

        >>> top_k_min([(0, 5), (1, 2), (2, 8), (3, 1)], 2)
        {3: 1, 1: 2}
    """
    _check_count(count)
    pairs = select(source, transform=transform, where=where)
    return _bounded_select(pairs, count, is_better=operator.lt, worst=max)


def top_k_max(
    source: PairSource,
    count: int = 1,
    *,
    transform: Transform | None = None,
    where: Predicate | None = None,
) -> OrderedMap:
    """Return the `count` largest non-None values of `source`, ascending.

        >>> top_k_max([(0, 5), (1, 2), (2, 8), (3, 1)], 2)
        {0: 5, 2: 8}
    """
    _check_count(count)
    pairs = select(source, transform=transform, where=where)
    return _bounded_select(pairs, count, is_better=operator.gt, worst=min)


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidArgumentError(
            f"count must be a positive integer, got {count!r}", "count",
        )


def _bounded_select(
    pairs: Iterable[tuple[Any, Any]],
    count: int,
    is_better: Callable[[Any, Any], bool],
    worst: Callable[[Iterable[Any]], Any],
) -> OrderedMap:
    buffer: dict = {}
    threshold = None
    for key, value in pairs:
        if value is None:
            continue
        if len(buffer) < count:  # filling up
            buffer[key] = value
            if len(buffer) == count:
                threshold = worst(buffer.values())
            continue
        if not is_better(value, threshold):
            continue
        evicted = next(k for k, v in buffer.items() if v == threshold)
        del buffer[evicted]
        buffer[key] = value
        threshold = worst(buffer.values())
    return dict(sorted(buffer.items(), key=lambda kv: kv[1]))
