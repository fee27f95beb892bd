"""Ordered Map Substrate — uniform (key, value) iteration and deterministic key order.

Invariants:
    - iter_pairs drains its source exactly once, lazily, in source order
    - Mappings iterate via .items(); any other iterable must yield 2-item pairs
    - list/tuple *values* are ordered maps keyed 0..n-1 (as_mapping); str/bytes never are
    - key_order is a total order over mixed int/str keys, identical in every process

Design Decisions:
    - Pairs over bare values at the top level: a list of tuples is a pair source,
      enumerate(values) adapts a plain sequence (ADR: one input shape, no guessing)
    - Numbers before strings before everything else: Python refuses to compare
      int with str, so sorted(dict) on mixed keys would raise
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from arrkit.core.errors import InvalidArgumentError
from arrkit.core.types import Predicate, Transform


_NUMERIC = (bool, int, float)


def iter_pairs(source: Any) -> Iterator[tuple[Any, Any]]:
    """Yield (key, value) pairs from a mapping or an iterable of pairs."""
    if isinstance(source, Mapping):
        yield from source.items()
        return
    if not isinstance(source, Iterable) or isinstance(source, (str, bytes)):
        raise InvalidArgumentError(
            f"expected a mapping or an iterable of (key, value) pairs, "
            f"got {type(source).__name__}",
            "source",
        )
    for position, item in enumerate(source):
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise InvalidArgumentError(
                f"element #{position} is not a (key, value) pair: {item!r}",
                "source",
            )
        yield item[0], item[1]


def is_container(value: Any) -> bool:
    """True for values treated as nested ordered maps."""
    return isinstance(value, (Mapping, list, tuple))


def as_mapping(value: Any) -> Mapping | None:
    """View a nested value as a mapping; None when it is a scalar."""
    if isinstance(value, Mapping):
        return value
    if isinstance(value, (list, tuple)):
        return dict(enumerate(value))
    return None


def select(
    source: Any,
    *,
    transform: Transform | None = None,
    where: Predicate | None = None,
) -> Iterator[tuple[Any, Any]]:
    """Filter (on the original value) then transform each pair."""
    for key, value in iter_pairs(source):
        if where is not None and not where(value):
            continue
        if transform is not None:
            value = transform(value)
        yield key, value


def key_order(key: Any) -> tuple:
    """Sort key for mixed-type mapping keys: numbers, then strings, then repr."""
    if isinstance(key, _NUMERIC):
        return (0, key, "")
    if isinstance(key, str):
        return (1, 0, key)
    return (2, 0, repr(key))


def sort_keys(keys: Iterable[Any]) -> list[Any]:
    return sorted(keys, key=key_order)


def sorted_items(data: Mapping) -> list[tuple[Any, Any]]:
    """Mapping items in key_order."""
    return sorted(data.items(), key=lambda kv: key_order(kv[0]))
