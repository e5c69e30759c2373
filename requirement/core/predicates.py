"""Predicate Factories — stateless builders for single-condition requirements.

Invariants:
    - Every factory returns a NamedPredicate whose message starts with "Must "
    - Every check except member_of, equal_to, same and the ordering family rejects None
    - Invalid factory arguments (negative bounds, missing pattern or sub-predicate)
      raise InvalidRequirementError at construction, before any value is tested
    - Ordering (lt/gt/le/ge/eq/ne) goes through ordering.compare: None sorts first

Design Decisions:
    - Set-like factories take *values, with *_all forms taking one iterable; both
      deduplicate with messages.ordered_unique:
      first-seen order drives the message, unhashable elements still work
    - Shared instances for argument-free predicates (NOT_BLANK, NOT_EMPTY): they hold no state
"""

import re
from typing import Any, Collection, Iterable, Mapping, Sized

from requirement.core.equality import deep_equals
from requirement.core.messages import display, ordered_unique, rewrite
from requirement.core.named import (
    NOT_NULL, NamedPredicate, check_argument, require_predicate, require_present,
)
from requirement.core.ordering import compare


NOT_BLANK: NamedPredicate[str] = NamedPredicate(
    lambda s: s is not None and len(s) > 0, "Must not be blank",
)
NOT_EMPTY: NamedPredicate[Sized] = NamedPredicate(
    lambda c: c is not None and len(c) > 0, "Must not be empty",
)
MAP_NOT_EMPTY: NamedPredicate[Mapping] = NamedPredicate(
    lambda m: m is not None and len(m) > 0, "Must not be empty",
)


def _non_negative(n: int) -> int:
    return check_argument(n, ge(0))


# ─── Presence ────────────────────────────────────────────────────

def not_null() -> NamedPredicate[Any]:
    return NOT_NULL


def not_blank() -> NamedPredicate[str]:
    return NOT_BLANK


# ─── Strings ─────────────────────────────────────────────────────

def min_length(n: int) -> NamedPredicate[str]:
    _non_negative(n)
    return NamedPredicate(
        lambda s: s is not None and len(s) >= n,
        f"Must have a length of at least {n}",
    )


def max_length(n: int) -> NamedPredicate[str]:
    _non_negative(n)
    return NamedPredicate(
        lambda s: s is not None and len(s) <= n,
        f"Must have a length of at most {n}",
    )


def matches(pattern: str | re.Pattern) -> NamedPredicate[str]:
    """Accept strings containing a match for pattern (re.search, not fullmatch).

    Anchor the pattern with ^...$ to require the whole string to match.
    """
    require_present(pattern, "pattern")
    compiled = re.compile(pattern)
    return NamedPredicate(
        lambda s: s is not None and compiled.search(s) is not None,
        f"Must match {display(compiled)}",
    )


# ─── Collections ─────────────────────────────────────────────────

def not_empty() -> NamedPredicate[Sized]:
    return NOT_EMPTY


def min_size(n: int) -> NamedPredicate[Sized]:
    _non_negative(n)
    return NamedPredicate(
        lambda c: c is not None and len(c) >= n,
        f"Must have a size of at least {n}",
    )


def max_size(n: int) -> NamedPredicate[Sized]:
    _non_negative(n)
    return NamedPredicate(
        lambda c: c is not None and len(c) <= n,
        f"Must have a size of at most {n}",
    )


def contains(value: Any) -> NamedPredicate[Collection]:
    return NamedPredicate(
        lambda c: c is not None and value in c,
        f"Must contain {display(value)}",
    )


def contains_key(key: Any) -> NamedPredicate[Mapping]:
    return NamedPredicate(
        lambda m: m is not None and key in m,
        f"Must contain key {display(key)}",
    )


def map_not_empty() -> NamedPredicate[Mapping]:
    return MAP_NOT_EMPTY


def superset_of(*values: Any) -> NamedPredicate[Collection]:
    """Accept collections holding every one of values. Order and duplicates are irrelevant."""
    members = ordered_unique(values)
    return NamedPredicate(
        lambda c: c is not None and all(m in c for m in members),
        f"Must be a superset of {display(members)}",
    )


def subset_of(*values: Any) -> NamedPredicate[Collection]:
    """Accept collections whose every element is one of values."""
    members = ordered_unique(values)
    return NamedPredicate(
        lambda c: c is not None and all(e in members for e in c),
        f"Must be a subset of {display(members)}",
    )


def superset_of_all(values: Iterable[Any]) -> NamedPredicate[Collection]:
    """superset_of taking one iterable: superset_of_all([1, 2]) == superset_of(1, 2)."""
    require_present(values, "values")
    return superset_of(*values)


def subset_of_all(values: Iterable[Any]) -> NamedPredicate[Collection]:
    require_present(values, "values")
    return subset_of(*values)


def all_members(predicate: NamedPredicate[Any]) -> NamedPredicate[Iterable]:
    """Accept iterables whose elements all pass predicate. Empty iterables pass."""
    require_predicate(predicate, "predicate")
    return NamedPredicate(
        lambda items: items is not None and all(predicate.test(e) for e in items),
        f"Must have all members ({rewrite(str(predicate))})",
    )


def any_member(predicate: NamedPredicate[Any]) -> NamedPredicate[Iterable]:
    """Accept iterables with at least one element passing predicate. Empty iterables fail."""
    require_predicate(predicate, "predicate")
    return NamedPredicate(
        lambda items: items is not None and any(predicate.test(e) for e in items),
        f"Must have any member ({rewrite(str(predicate))})",
    )


def member_of(*values: Any) -> NamedPredicate[Any]:
    """Accept values equal to one of values. None passes only when listed."""
    members = ordered_unique(values)
    return NamedPredicate(
        lambda v: v in members,
        f"Must be a member of {display(members)}",
    )


def member_of_all(values: Iterable[Any]) -> NamedPredicate[Any]:
    """member_of taking one iterable, e.g. a set or the members of an Enum."""
    require_present(values, "values")
    return member_of(*values)


# ─── Ordering ────────────────────────────────────────────────────

def lt(value: Any) -> NamedPredicate[Any]:
    return NamedPredicate(lambda o: compare(o, value) < 0, f"Must be less than {display(value)}")


def gt(value: Any) -> NamedPredicate[Any]:
    return NamedPredicate(lambda o: compare(o, value) > 0, f"Must be greater than {display(value)}")


def le(value: Any) -> NamedPredicate[Any]:
    return NamedPredicate(
        lambda o: compare(o, value) <= 0,
        f"Must be less than or equal to {display(value)}",
    )


def ge(value: Any) -> NamedPredicate[Any]:
    return NamedPredicate(
        lambda o: compare(o, value) >= 0,
        f"Must be greater than or equal to {display(value)}",
    )


def eq(value: Any) -> NamedPredicate[Any]:
    return NamedPredicate(lambda o: compare(o, value) == 0, f"Must be equal to {display(value)}")


def ne(value: Any) -> NamedPredicate[Any]:
    return NamedPredicate(lambda o: compare(o, value) != 0, f"Must be not equal to {display(value)}")


# ─── Equality ────────────────────────────────────────────────────

def equal_to(value: Any) -> NamedPredicate[Any]:
    """Structural equality (see equality.deep_equals)."""
    return NamedPredicate(lambda o: deep_equals(o, value), f"Must be equal to {display(value)}")


def same(value: Any) -> NamedPredicate[Any]:
    """Identity: passes only for the very object given."""
    return NamedPredicate(lambda o: o is value, f"Must be same object as {display(value)}")
