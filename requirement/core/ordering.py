"""Null-Aware Ordering — three-way comparison where None sorts first.

Invariants:
    - compare(None, None) == 0
    - compare(None, x) == -1 and compare(x, None) == 1 for any present x
    - Present values use their own < and ==; TypeError from incomparable values propagates
"""

from typing import Any


def compare(left: Any, right: Any) -> int:
    if left is None:
        return 0 if right is None else -1
    if right is None:
        return 1
    if left < right:
        return -1
    if left == right:
        return 0
    return 1
