"""Named Values — predicates and functions that carry their own display text.

Invariants:
    - NamedPredicate and NamedFunction are frozen: the callable and message never change
    - str() of either returns exactly its message
    - NamedPredicate.test always returns a real bool

Design Decisions:
    - Pairing (callable, message) in a frozen dataclass instead of subclassing per check:
      every factory is one constructor call
    - Sub-predicate arguments must be NamedPredicate instances (require_predicate);
      a bare callable is rejected at construction, not at first test
    - check_argument raises InvalidRequirementError, never RequirementNotMetError:
      construction-time failures stay distinguishable from test-time failures
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from requirement.core.errors import InvalidRequirementError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class NamedPredicate(Generic[T]):
    """A boolean test over a value, paired with the sentence shown on failure."""

    fn: Callable[[T], Any]
    message: str

    def test(self, value: T) -> bool:
        return bool(self.fn(value))

    def __call__(self, value: T) -> bool:
        return self.test(value)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"NamedPredicate({self.message!r})"

    # Operator forms of the combinators. Imported lazily: combinators depends on this module.

    def __and__(self, other: "NamedPredicate[T]") -> "NamedPredicate[T]":
        from requirement.core.combinators import and_
        return and_(self, other)

    def __or__(self, other: "NamedPredicate[T]") -> "NamedPredicate[T]":
        from requirement.core.combinators import or_
        return or_(self, other)

    def __invert__(self) -> "NamedPredicate[T]":
        from requirement.core.combinators import negate
        return negate(self)


@dataclass(frozen=True)
class NamedFunction(Generic[T, U]):
    """A projection applied before testing (see combinators.chain)."""

    fn: Callable[[T], U]
    message: str

    def apply(self, value: T) -> U:
        return self.fn(value)

    def __call__(self, value: T) -> U:
        return self.apply(value)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"NamedFunction({self.message!r})"


NOT_NULL: NamedPredicate[Any] = NamedPredicate(lambda v: v is not None, "Must not be null")


def check_argument(value: T, predicate: NamedPredicate[T], argument: str | None = None) -> T:
    """Validate a factory argument. Raises InvalidRequirementError on failure."""
    if not predicate.test(value):
        message = f"{argument}: {predicate}" if argument else str(predicate)
        raise InvalidRequirementError(message, argument)
    return value


def require_present(value: T, argument: str | None = None) -> T:
    return check_argument(value, NOT_NULL, argument)


IS_NAMED_PREDICATE: NamedPredicate[Any] = NamedPredicate(
    lambda v: isinstance(v, NamedPredicate), "Must be a NamedPredicate (wrap plain callables with name())",
)


def require_predicate(value: Any, argument: str | None = None) -> NamedPredicate[Any]:
    """Validate a sub-predicate argument: present, and a NamedPredicate rather than a bare callable."""
    require_present(value, argument)
    return check_argument(value, IS_NAMED_PREDICATE, argument)


def name(predicate: Callable[[T], Any], message: str) -> NamedPredicate[T]:
    """Attach a display message to any callable test."""
    require_present(predicate, "predicate")
    require_present(message, "message")
    return NamedPredicate(predicate, message)


def name_function(fn: Callable[[T], U], message: str) -> NamedFunction[T, U]:
    """Attach a display message to any callable projection."""
    require_present(fn, "fn")
    require_present(message, "message")
    return NamedFunction(fn, message)
