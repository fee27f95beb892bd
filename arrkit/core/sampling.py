"""Sampling — random keys, samples and shuffles with an injected RNG.

Invariants:
    - random_key and random_sample need at least one element: empty input raises
      EmptySourceError before anything else is checked
    - random_sample keeps source order among the chosen elements
    - No helper touches the module-level `random` state

Design Decisions:
    - rng parameter (random.Random) over a process-wide generator: tests seed their own
      instance, concurrent callers never share state
"""

import random
from collections.abc import Mapping
from typing import Any

from arrkit.core.errors import EmptySourceError, InvalidArgumentError
from arrkit.core.ordered_map import as_mapping


def random_key(data: Mapping | list | tuple, *, rng: random.Random | None = None) -> Any:
    """One key chosen uniformly from `data`."""
    mapping = _require_items(data)
    rng = rng or random.Random()
    return rng.choice(list(mapping.keys()))


def random_sample(
    data: Mapping | list | tuple,
    size: int,
    *,
    preserve_keys: bool = True,
    rng: random.Random | None = None,
) -> dict | list:
    """Up to `size` elements of `data`, in source order.

    preserve_keys=False returns a plain list of the chosen values.
    """
    mapping = _require_items(data)
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidArgumentError(
            f"size must be a non-negative integer, got {size!r}", "size",
        )

    if len(mapping) <= size:
        chosen = dict(mapping)
    else:
        rng = rng or random.Random()
        picked = set(rng.sample(range(len(mapping)), size))
        chosen = {
            k: v for position, (k, v) in enumerate(mapping.items()) if position in picked
        }
    return chosen if preserve_keys else list(chosen.values())


def shuffle(values: Any, *, seed: int | None = None) -> list:
    """New list with the values of `values` in random order.

    A seed makes the permutation reproducible.
    """
    mapping = as_mapping(values)
    result = list(mapping.values()) if mapping is not None else list(values)
    random.Random(seed).shuffle(result)
    return result


def _require_items(data: Any) -> Mapping:
    mapping = as_mapping(data)
    if mapping is None:
        raise InvalidArgumentError(
            f"expected a mapping, list or tuple, got {type(data).__name__}", "data",
        )
    if not mapping:
        raise EmptySourceError("data")
    return mapping
