"""
Guard failures.

Provides the failure taxonomy (NullViolation, InvalidArgument, OutOfRange),
the exception hierarchy raised by every guard, a structured Violation record
attached to each error, and the single raise path that logs violations via
structlog before raising.
"""

from __future__ import annotations

from enum import Enum
from typing import NoReturn, Optional

import structlog
from pydantic import BaseModel, Field

from against.config.settings import get_settings

logger = structlog.get_logger(__name__)


# -----------------------------------------------------------------------------
# Failure classification
# -----------------------------------------------------------------------------


class FailureKind(str, Enum):
    """Classification of guard failures."""

    NULL_VIOLATION = "null_violation"  # value was None where presence was required
    INVALID_ARGUMENT = "invalid_argument"  # value failed a shape check
    OUT_OF_RANGE = "out_of_range"  # value fell outside a bounded interval


class Violation(BaseModel):
    """Structured description of a failed guard: kind, message, argument name."""

    kind: FailureKind = Field(..., description="Failure classification")
    message: str = Field(..., description="Fixed English description of the violated condition")
    name: Optional[str] = Field(default=None, description="Identifier of the offending argument, if supplied")


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------


class GuardError(ValueError):
    """Base class for every error raised by a guard."""

    kind: FailureKind = FailureKind.INVALID_ARGUMENT

    def __init__(self, message: str, name: Optional[str] = None) -> None:
        self.message = message
        self.name = name
        self.violation = Violation(kind=self.kind, message=message, name=name)
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.name:
            return f"{self.message} (Parameter '{self.name}')"
        return self.message


class InvalidArgumentError(GuardError):
    """Raised when an argument fails a value-shape check."""

    kind = FailureKind.INVALID_ARGUMENT


class NullArgumentError(InvalidArgumentError):
    """Raised when an argument is None where a value is required."""

    kind = FailureKind.NULL_VIOLATION


class ArgumentOutOfRangeError(InvalidArgumentError):
    """Raised when an argument falls outside an inclusive interval."""

    kind = FailureKind.OUT_OF_RANGE


def fail(error: GuardError) -> NoReturn:
    """Log the violation carried by *error* (when enabled) and raise it."""
    if get_settings().guard.log_violations:
        logger.debug("guard_violation", **error.violation.model_dump(mode="json"))
    raise error


__all__ = [
    "ArgumentOutOfRangeError",
    "FailureKind",
    "GuardError",
    "InvalidArgumentError",
    "NullArgumentError",
    "Violation",
    "fail",
]
