"""Named Functions — built-in projections for use with combinators.chain.

Invariants:
    - Each projection is a shared, immutable NamedFunction
    - Projections do not guard against None: len(None) raises TypeError, and chain lets it through
"""

from typing import Any, Mapping, Sized

from requirement.core.named import NamedFunction


LENGTH: NamedFunction[str, int] = NamedFunction(len, "length")
SIZE: NamedFunction[Sized, int] = NamedFunction(len, "size")
MAP_SIZE: NamedFunction[Mapping, int] = NamedFunction(len, "size")
KEYS: NamedFunction[Mapping, list] = NamedFunction(lambda m: list(m.keys()), "keys")
VALUES: NamedFunction[Mapping, list] = NamedFunction(lambda m: list(m.values()), "values")
STRINGIFY: NamedFunction[Any, str] = NamedFunction(str, "str")
HASH_CODE: NamedFunction[Any, int] = NamedFunction(hash, "hash")


def length() -> NamedFunction[str, int]:
    return LENGTH


def size() -> NamedFunction[Sized, int]:
    return SIZE


def map_size() -> NamedFunction[Mapping, int]:
    return MAP_SIZE


def keys() -> NamedFunction[Mapping, list]:
    return KEYS


def values() -> NamedFunction[Mapping, list]:
    return VALUES


def stringify() -> NamedFunction[Any, str]:
    return STRINGIFY


def hash_code() -> NamedFunction[Any, int]:
    return HASH_CODE
