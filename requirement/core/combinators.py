"""Combinators — build new requirements out of existing ones.

Invariants:
    - and_/or_ short-circuit: the second predicate runs only when the first does not decide
    - if_then_else evaluates exactly one branch per test
    - chain never catches: anything the projection raises reaches the caller of require()
    - does_not_throw_exception is the only place an exception becomes a False result
    - Missing arguments raise InvalidRequirementError("<argument>: Must not be null")
    - Predicate arguments must be NamedPredicate instances; fn and consumer may be any callable
"""

import logging
from typing import Any, Callable, TypeVar

from requirement.core.messages import rewrite
from requirement.core.named import NamedFunction, NamedPredicate, require_predicate, require_present

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def and_(p1: NamedPredicate[T], p2: NamedPredicate[T]) -> NamedPredicate[T]:
    require_predicate(p1, "p1")
    require_predicate(p2, "p2")
    return NamedPredicate(
        lambda v: p1.test(v) and p2.test(v),
        f"Must ({rewrite(str(p1))}) and ({rewrite(str(p2))})",
    )


def or_(p1: NamedPredicate[T], p2: NamedPredicate[T]) -> NamedPredicate[T]:
    require_predicate(p1, "p1")
    require_predicate(p2, "p2")
    return NamedPredicate(
        lambda v: p1.test(v) or p2.test(v),
        f"Must ({rewrite(str(p1))}) or ({rewrite(str(p2))})",
    )


def negate(p: NamedPredicate[T]) -> NamedPredicate[T]:
    require_predicate(p, "p")
    return NamedPredicate(lambda v: not p.test(v), f"Must not ({rewrite(str(p))})")


def if_then_else(
    if_p: NamedPredicate[T], then_p: NamedPredicate[T], else_p: NamedPredicate[T],
) -> NamedPredicate[T]:
    require_predicate(if_p, "if_p")
    require_predicate(then_p, "then_p")
    require_predicate(else_p, "else_p")
    return NamedPredicate(
        lambda v: then_p.test(v) if if_p.test(v) else else_p.test(v),
        f"Must ({rewrite(str(then_p))}) if ({rewrite(str(if_p))}), "
        f"otherwise ({rewrite(str(else_p))})",
    )


def if_then(if_p: NamedPredicate[T], then_p: NamedPredicate[T]) -> NamedPredicate[T]:
    """Conditional requirement: values failing if_p pass vacuously."""
    require_predicate(if_p, "if_p")
    require_predicate(then_p, "then_p")
    return NamedPredicate(
        lambda v: then_p.test(v) if if_p.test(v) else True,
        f"Must ({rewrite(str(then_p))}) if ({rewrite(str(if_p))})",
    )


def chain(fn: NamedFunction[T, U], p: NamedPredicate[U]) -> NamedPredicate[T]:
    """Project the value through fn, then test the projection with p.

    Message is "<fn>: <p>", e.g. "length: Must be greater than 2".
    """
    require_present(fn, "fn")
    require_predicate(p, "p")
    return NamedPredicate(lambda v: p.test(fn(v)), f"{fn}: {p}")


def does_not_throw_exception(consumer: Callable[[T], Any]) -> NamedPredicate[T]:
    """Pass when consumer(value) returns normally; any Exception counts as failure."""
    require_present(consumer, "consumer")

    def _completes(value: T) -> bool:
        try:
            consumer(value)
        except Exception as e:
            logger.debug(
                "Consumer raised %s, requirement not met", type(e).__name__,
                extra={"exception": repr(e)},
            )
            return False
        return True

    return NamedPredicate(_completes, "Must not throw an exception")
