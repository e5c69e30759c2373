"""Structural Equality — deep comparison used by equal_to.

Invariants:
    - deep_equals(None, None) is True; None never equals a present value
    - Flat arrays (bytes, bytearray, memoryview, array.array) compare element-wise,
      regardless of which of those containers holds the elements
    - NaN equals NaN at every level, so array("d", [nan]) equals a copy of itself
    - list and tuple compare recursively and only against the same kind of sequence
    - Everything else falls back to == (NaN aside)
"""

import array
from typing import Any

_FLAT_ARRAYS = (bytes, bytearray, memoryview, array.array)


def _same_element(a: Any, b: Any) -> bool:
    # NaN is the only value unequal to itself
    return a == b or (a != a and b != b)


def deep_equals(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return left is right
    if isinstance(left, _FLAT_ARRAYS) and isinstance(right, _FLAT_ARRAYS):
        return len(left) == len(right) and all(
            _same_element(a, b) for a, b in zip(left, right)
        )
    for kind in (list, tuple):
        if isinstance(left, kind) or isinstance(right, kind):
            if not (isinstance(left, kind) and isinstance(right, kind)):
                return False
            return len(left) == len(right) and all(
                deep_equals(a, b) for a, b in zip(left, right)
            )
    return bool(_same_element(left, right))
