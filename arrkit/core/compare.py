"""Deep Compare — symmetric structural equality of nested ordered maps.

Invariants:
    - Key order is irrelevant at every depth
    - A key mapped to None is equivalent to the key being absent
    - deep_equal(a, b, s) == deep_equal(b, a, s) for every input
    - The strict flag reaches every level of the recursion
    - A nested container never equals a scalar (including None)

Design Decisions:
    - Visit the union of both key sets, so {"a": 1} never equals
      {"a": 1, "b": 2}
    - Recurse into the two values found under the visited key, never into the
      enclosing structure
    - Loose mode compares numbers exactly (Decimal): no float rounding above 2**53,
      no overflow to inf; non-finite values are not numeric. It adopts no other
      cross-type equality (e.g. None == 0 stays False)
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from arrkit.core.ordered_map import as_mapping


def deep_equal(a: Any, b: Any, strict: bool = True) -> bool:
    """Compare two nested mappings (or lists/tuples) at any depth.

    strict=True requires identical scalar types (1 != 1.0, True != 1);
    strict=False compares after numeric coercion ("2" == 2 == 2.0).
    """
    left, right = as_mapping(a), as_mapping(b)
    if left is None or right is None:
        return left is None and right is None and _scalar_equal(a, b, strict)

    for key in _union_keys(left, right):
        av = left.get(key)
        bv = right.get(key)
        left_nested, right_nested = as_mapping(av), as_mapping(bv)
        if left_nested is not None or right_nested is not None:
            if left_nested is None or right_nested is None:
                return False
            if not deep_equal(left_nested, right_nested, strict):
                return False
            continue
        if not _scalar_equal(av, bv, strict):
            return False
    return True


def _union_keys(left, right) -> list:
    keys = list(left.keys())
    keys.extend(k for k in right.keys() if k not in left)
    return keys


def _scalar_equal(av: Any, bv: Any, strict: bool) -> bool:
    if strict:
        return type(av) is type(bv) and av == bv
    if av == bv:
        return True
    an, bn = _as_number(av), _as_number(bv)
    return an is not None and bn is not None and an == bn


def _as_number(value: Any) -> Decimal | None:
    """Exact numeric view of a scalar; None for non-numeric or non-finite values."""
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None
