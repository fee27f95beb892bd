"""Shared Types — names for keys, ordered maps and the callback shapes.

Invariants:
    - Callback shapes are distinct named types; helpers never inspect a callable's arity
    - Predicate/Transform/KeyFn receive the value only; ItemPredicate receives (key, value)

Design Decisions:
    - Type aliases over Protocols: callers pass lambdas, aliases document intent at zero cost
    - UNSET sentinel: None is a legitimate search value for split_at(value=...)
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any


# ─── Data Shapes ─────────────────────────────────────────────────

OrderedMap = dict[Any, Any]
PairSource = Mapping[Any, Any] | Iterable[tuple[Any, Any]]


# ─── Callback Shapes ─────────────────────────────────────────────

Predicate = Callable[[Any], bool]               # value -> keep?
ItemPredicate = Callable[[Any, Any], bool]      # (key, value) -> match?
Transform = Callable[[Any], Any]                # value -> value
KeyFn = Callable[[Any], Any]                    # value -> group label / sort key
Comparator = Callable[[Any, Any], int]          # (left, right) -> -1 | 0 | 1


class _Unset:
    """Marker for 'argument not supplied' where None is a valid argument."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()
