"""Require — test a value against a requirement, return it or raise.

Invariants:
    - On success the value is returned unchanged (usable inline as a guard clause)
    - On failure exactly one exception is raised, chosen by the call form:
        require(v, p)               -> RequirementNotMetError(str(p))
        require(v, p, prefix)       -> RequirementNotMetError(f"{prefix}: {p}")
        require(v, p, error=make)   -> make(v, p)
    - A callable prefix is only invoked on failure
    - Argument problems (missing or bare-callable predicate, prefix and error
      together) raise InvalidRequirementError before the value is tested

Design Decisions:
    - One function with a keyword-only error factory instead of overloads: a prefix
      supplier and an error factory are both callables and cannot be told apart by type
"""

import logging
from typing import Any, Callable, TypeVar

from requirement.core.errors import InvalidRequirementError, RequirementNotMetError
from requirement.core.named import NamedPredicate, require_predicate

logger = logging.getLogger(__name__)

T = TypeVar("T")

Prefix = str | Callable[[], str]
ErrorFactory = Callable[[Any, NamedPredicate[Any]], BaseException]


def require(
    value: T,
    predicate: NamedPredicate[T],
    prefix: Prefix | None = None,
    *,
    error: ErrorFactory | None = None,
) -> T:
    """Return value if predicate holds for it, otherwise raise.

    Example:
        require("abc", min_length(3)) == "abc"
        require("ab", min_length(3))  # RequirementNotMetError: Must have a length of at least 3
        require("ab", min_length(3), "name")  # ... name: Must have a length of at least 3
    """
    require_predicate(predicate, "predicate")
    if prefix is not None and error is not None:
        raise InvalidRequirementError(
            "prefix and error are mutually exclusive", "error",
        )

    if predicate.test(value):
        return value

    if error is not None:
        exc = error(value, predicate)
        if not isinstance(exc, BaseException):
            raise InvalidRequirementError(
                f"error: Must return an exception, got {type(exc).__name__}", "error",
            )
        _log_failure(value, predicate, type(exc).__name__)
        raise exc

    message = str(predicate)
    if prefix is not None:
        label = prefix() if callable(prefix) else prefix
        message = f"{label}: {message}"
    _log_failure(value, predicate, "REQUIREMENT_NOT_MET")
    raise RequirementNotMetError(message, value, predicate)


def _log_failure(value: Any, predicate: NamedPredicate[Any], error_code: str) -> None:
    logger.debug(
        "Requirement not met: %s", predicate,
        extra={
            "requirement": str(predicate),
            "error_code": error_code,
            "value_type": type(value).__name__,
        },
    )
