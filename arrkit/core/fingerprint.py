"""Structural Fingerprint — deterministic digest of a nested ordered map.

Invariants:
    - Same structure + same orderless flag + same algorithm -> byte-identical digest,
      in every process (no reliance on hash() or set iteration)
    - orderless=True: entries sorted by key_order, int keys rendered as "" labels
    - orderless=False: insertion order is part of the digest
    - None is hashed as "key present with no value" (differs from deep_equal, where
      None means absent; the two are intentionally not unified)
    - Unsupported value kinds are logged and skipped, never raised

Design Decisions:
    - Line-per-entry canonical text + hashlib over json.dumps: nested digests keep each
      level's text short and let bool/None render unambiguously
    - md5 default with usedforsecurity=False: content addressing, not a security boundary
    - Sorting by key, not value: [1, 2] and [2, 1] do NOT collide under orderless=True
"""

import hashlib
import logging
from typing import Any

from arrkit.core.errors import InvalidArgumentError, UnsupportedValueError
from arrkit.core.ordered_map import as_mapping, iter_pairs, sorted_items

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "md5"


def structural_hash(
    data: Any, orderless: bool = True, *, algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Hex digest of `data` (mapping, list/tuple or pair iterable).

        >>> structural_hash({"a": 1, "b": 2}) == structural_hash({"b": 2, "a": 1})
        True
        >>> structural_hash({"a": 1, "b": 2}, False) == structural_hash({"b": 2, "a": 1}, False)
        False
    """
    _check_algorithm(algorithm)
    return _digest(data, orderless, algorithm)


def _digest(data: Any, orderless: bool, algorithm: str) -> str:
    mapping = as_mapping(data)
    items = list(iter_pairs(data)) if mapping is None else list(mapping.items())
    if orderless:
        items = sorted_items(dict(items))

    fragments = []
    for key, value in items:
        label = "" if orderless and _is_positional(key) else str(key)
        fragment = _render(label, key, value, orderless, algorithm)
        if fragment is not None:
            fragments.append(fragment)

    text = "\n".join(fragments)
    return hashlib.new(algorithm, text.encode("utf-8"), usedforsecurity=False).hexdigest()


def _render(label: str, key: Any, value: Any, orderless: bool, algorithm: str) -> str | None:
    if isinstance(value, bool):
        return f"{label}-{'1' if value else ''}"
    if isinstance(value, (str, int, float)):
        return f"{label}:{value}"
    if as_mapping(value) is not None:
        return f"{label}:[{_digest(value, orderless, algorithm)}]"
    if value is None:
        return f"{label}/"
    err = UnsupportedValueError(key, value)
    logger.warning(
        err.message,
        extra={"error_code": err.code, "key": str(key), "value_type": err.value_type},
    )
    return None


def _is_positional(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _check_algorithm(algorithm: str) -> None:
    if algorithm not in hashlib.algorithms_available:
        raise InvalidArgumentError(
            f"unknown hash algorithm {algorithm!r}", "algorithm",
        )
    if algorithm.startswith("shake_"):  # variable-length digests need an explicit size
        raise InvalidArgumentError(
            f"variable-length algorithm {algorithm!r} not supported", "algorithm",
        )
