"""Error Hierarchy — typed, categorized exceptions for requirement failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - str(error) is exactly the message — callers assert on it verbatim
    - Construction-time failures (InvalidRequirementError) never share a class
      with test-time failures (RequirementNotMetError)
    - Both concrete errors are ValueError subclasses: a failed requirement is an invalid argument

Design Decisions:
    - Single hierarchy with RequirementError base: callers catch one type for everything raised here
    - ErrorContext as dataclass: observability without coupling to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    argument: str | None = None
    value_type: str | None = None
    debug_info: dict[str, Any] | None = None


class RequirementError(Exception):
    """Base exception for all requirement errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "argument": self.context.argument,
                    "value_type": self.context.value_type,
                },
            }
        }


# ─── Construction-time ──────────────────────────────────────────

class InvalidRequirementError(RequirementError, ValueError):
    """A factory or combinator received an invalid argument."""
    def __init__(
        self, message: str, argument: str | None = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.argument = argument
        super().__init__(
            message, "INVALID_REQUIREMENT", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.argument = argument


# ─── Test-time ──────────────────────────────────────────────────

class RequirementNotMetError(RequirementError, ValueError):
    """A value failed the predicate passed to require()."""
    def __init__(
        self, message: str, value: Any, predicate: Any, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.value_type = type(value).__name__
        super().__init__(
            message, "REQUIREMENT_NOT_MET", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.value = value
        self.predicate = predicate
