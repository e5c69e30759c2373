"""Message Text — rewriting and value display for requirement messages.

Invariants:
    - Every built-in message starts with MUST_PREFIX
    - rewrite() is applied to sub-messages only, never to a top-level message
    - display() never raises for values whose str() does not raise
"""

import array
import re
from typing import Any, Iterable

MUST_PREFIX = "Must "


def rewrite(message: str) -> str:
    """Strip a leading 'Must ' and lower-case the next letter.

    Messages without the prefix (user-named predicates, chain messages) are
    returned unchanged.
    """
    if not message.startswith(MUST_PREFIX):
        return message
    rest = message[len(MUST_PREFIX):]
    return rest[:1].lower() + rest[1:]


def display(value: Any) -> str:
    """Render a value the way messages show it: '[1, 8]', 'abc', 'None'."""
    if value is None:
        return "None"
    if isinstance(value, str):
        return value
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, (bytes, bytearray, memoryview, array.array)):
        return "[" + ", ".join(str(v) for v in value) + "]"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + ", ".join(display(v) for v in value) + "]"
    return str(value)


def ordered_unique(values: Iterable[Any]) -> list[Any]:
    """Collapse duplicates (by ==) keeping first-seen order. Accepts unhashable values."""
    unique: list[Any] = []
    for v in values:
        if v not in unique:
            unique.append(v)
    return unique
