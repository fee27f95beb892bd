"""Reshaping — cleanup, key positions, keyed inserts and dot-flattening.

Invariants:
    - Inputs are never mutated; every helper builds a new dict
    - clean_up and dot reject scalar input with InvalidArgumentError
    - clean_up keeps False, 0 and "0"; drops None, "" and empty containers recursively
    - insert_after / insert_before leave data unchanged when the key is missing,
      unless insert_when_not_found (then items go to the end / the start)
"""

from collections.abc import Mapping
from typing import Any

from arrkit.core.errors import InvalidArgumentError
from arrkit.core.ordered_map import as_mapping, is_container


def clean_up(data: Mapping | list | tuple) -> dict:
    """Recursively drop None, "" and empty containers."""
    result = {}
    for key, value in _require_mapping(data).items():
        if is_container(value):
            value = clean_up(value)
        if value is None or value == "" or value == {}:
            continue
        result[key] = value
    return result


def is_assoc(data: Mapping | list | tuple) -> bool:
    """False for empty data or keys exactly 0..n-1, True otherwise."""
    mapping = as_mapping(data)
    if not mapping:
        return False
    return list(mapping.keys()) != list(range(len(mapping)))


def key_offset(data: Mapping, key: Any) -> int:
    """Position of `key` in iteration order, -1 when missing."""
    for position, k in enumerate(data):
        if k == key and type(k) is type(key):
            return position
    return -1


def insert_after(
    data: Mapping, key: Any, items: Mapping, insert_when_not_found: bool = False,
) -> dict:
    position = key_offset(data, key)
    if position < 0:
        return {**data, **items} if insert_when_not_found else dict(data)
    return _splice(data, position + 1, items)


def insert_before(
    data: Mapping, key: Any, items: Mapping, insert_when_not_found: bool = False,
) -> dict:
    position = key_offset(data, key)
    if position < 0:
        return {**items, **data} if insert_when_not_found else dict(data)
    return _splice(data, position, items)


def _splice(data: Mapping, position: int, items: Mapping) -> dict:
    entries = list(data.items())
    result = dict(entries[:position])
    result.update(items)
    for k, v in entries[position:]:
        result.setdefault(k, v)  # keys already in items keep the inserted value
    return result


def dot(data: Mapping | list | tuple, path: str = "") -> dict[str, Any]:
    """Flatten nested containers: {"a": {"b": 1}} -> {"a.b": 1}.

    Empty nested containers are kept as leaves.
    """
    flat: dict[str, Any] = {}
    for key, value in _require_mapping(data).items():
        full = f"{path}.{key}" if path else str(key)
        nested = as_mapping(value)
        if nested:
            flat.update(dot(nested, full))
        else:
            flat[full] = value
    return flat


def _require_mapping(data: Any) -> Mapping:
    mapping = as_mapping(data)
    if mapping is None:
        raise InvalidArgumentError(
            f"expected a mapping, list or tuple, got {type(data).__name__}", "data",
        )
    return mapping
