"""
against: guard clauses for function arguments.

Scalar guards return the argument unchanged or raise; iterable guards materialize
the argument once and run chainable checks over it.

    import against

    def schedule(job, retries, tags):
        job = against.null(job, "job")
        retries = against.out_of_range(retries, 0, 10, "retries")
        tags = against.empty_or_null_elements(tags, name="tags")
"""

from against.config.settings import get_settings
from against.errors import (
    ArgumentOutOfRangeError,
    FailureKind,
    GuardError,
    InvalidArgumentError,
    NullArgumentError,
    Violation,
)
from against.scalars import (
    greater_than,
    invalid_type,
    less_than,
    negative,
    null,
    null_or_whitespace,
    out_of_range,
    violation,
)
from against.sequences import (
    IterableValidator,
    empty,
    empty_or_null_elements,
    invalid_iterable,
    null_elements,
)
from against.utils.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    "ArgumentOutOfRangeError",
    "FailureKind",
    "GuardError",
    "InvalidArgumentError",
    "IterableValidator",
    "NullArgumentError",
    "Violation",
    "configure_logging",
    "empty",
    "empty_or_null_elements",
    "get_settings",
    "greater_than",
    "invalid_iterable",
    "invalid_type",
    "less_than",
    "negative",
    "null",
    "null_elements",
    "null_or_whitespace",
    "out_of_range",
    "violation",
]
