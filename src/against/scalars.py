"""
Scalar guards.

Stateless checks over a single argument. Each guard returns the argument unchanged
when the precondition holds and raises a GuardError subclass otherwise. Every
guard takes an optional ``name`` identifying the argument in the error message.

    from against import null, out_of_range

    def resize(image, width):
        image = null(image, "image")
        width = out_of_range(width, 1, 4096, "width")
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar, Union, get_args, get_origin

from against.errors import (
    ArgumentOutOfRangeError,
    InvalidArgumentError,
    NullArgumentError,
    fail,
)
from against.utils.extensions import (
    every_base_type,
    is_greater_than,
    is_less_than,
    orig_bases,
)

T = TypeVar("T")
Number = Union[int, float]


def _when_present(value: Optional[T], check: Callable[[T], T]) -> Optional[T]:
    """Apply *check* only when *value* is not None; absence is never a violation."""
    return value if value is None else check(value)


# -----------------------------------------------------------------------------
# Presence
# -----------------------------------------------------------------------------


def null(value: Optional[T], name: Optional[str] = None) -> T:
    """Return *value* if it is not None; raise NullArgumentError otherwise."""
    if value is None:
        fail(NullArgumentError("The provided object is None.", name))
    return value


def null_or_whitespace(s: Optional[str], name: Optional[str] = None) -> str:
    """
    Return *s* if it is a string with at least one non-whitespace character.

    None, the empty string, and whitespace-only strings raise InvalidArgumentError.
    """
    if not isinstance(s, str) or not s.strip():
        fail(InvalidArgumentError("The provided string is None, empty, or whitespace.", name))
    return s


# -----------------------------------------------------------------------------
# Numeric
# -----------------------------------------------------------------------------


def _describe_number(value: Any) -> str:
    if isinstance(value, float):
        return "float"
    if isinstance(value, int):
        return "integer"
    return "number"


def negative(value: Optional[Number], name: Optional[str] = None) -> Optional[Number]:
    """
    Return *value* if it is greater than or equal to zero, or None.

    Raises InvalidArgumentError when *value* is less than zero. ``-0.0`` and
    ``nan`` are not negative.
    """

    def check(v: Number) -> Number:
        if v < 0:
            fail(InvalidArgumentError(f"The provided {_describe_number(v)} is negative.", name))
        return v

    return _when_present(value, check)


def out_of_range(
    value: Optional[Number],
    minimum: Number,
    maximum: Number,
    name: Optional[str] = None,
) -> Optional[Number]:
    """
    Return *value* if it lies on the inclusive interval [minimum, maximum], or None.

    Raises ArgumentOutOfRangeError when *value* is less than *minimum* or greater
    than *maximum*.
    """

    def check(v: Number) -> Number:
        if v < minimum or v > maximum:
            fail(
                ArgumentOutOfRangeError(
                    f"{v} is not between {minimum} (inclusive) and {maximum} (inclusive).",
                    name,
                )
            )
        return v

    return _when_present(value, check)


# -----------------------------------------------------------------------------
# Ordering
# -----------------------------------------------------------------------------


def less_than(value: T, minimum: T, name: Optional[str] = None) -> T:
    """Return *value* unless it compares less than *minimum*."""
    if is_less_than(value, minimum):
        fail(InvalidArgumentError(f"The provided object compares less than {minimum}.", name))
    return value


def greater_than(value: T, maximum: T, name: Optional[str] = None) -> T:
    """Return *value* unless it compares greater than *maximum*."""
    if is_greater_than(value, maximum):
        fail(InvalidArgumentError(f"The provided object compares greater than {maximum}.", name))
    return value


# -----------------------------------------------------------------------------
# Predicates
# -----------------------------------------------------------------------------

DEFAULT_VIOLATION_MESSAGE = "The provided object violates a precondition."


def violation(
    value: T,
    precondition: Callable[[T], Any],
    message: Optional[str] = None,
    name: Optional[str] = None,
) -> T:
    """
    Return *value* if it satisfies *precondition*.

    *message* describes how the precondition fails and becomes the error message.
    """
    if not precondition(value):
        fail(InvalidArgumentError(message if message is not None else DEFAULT_VIOLATION_MESSAGE, name))
    return value


# -----------------------------------------------------------------------------
# Types
# -----------------------------------------------------------------------------


def _type_name(target: Any) -> str:
    return target.__name__ if isinstance(target, type) else str(target)


def _is_assignable(type_: Any, target: Any) -> bool:
    """
    Plain classes, ABCs and unparameterized generic classes use issubclass.

    A parameterized target such as ``Box[int]`` matches when *type_* is that
    alias, or when *type_* or any of its ancestors declares it as a base.
    """
    origin = get_origin(target)
    if origin is not None and not get_args(target):
        # bare typing aliases, e.g. typing.Mapping
        target, origin = origin, None

    if origin is None:
        return isinstance(type_, type) and issubclass(type_, target)

    if type_ == target:
        return True
    if not isinstance(type_, type):
        return False
    return any(base == target for cls in every_base_type(type_) for base in orig_bases(cls))


def invalid_type(type_: Any, target: Any, name: Optional[str] = None) -> Any:
    """
    Return *type_* if it is assignable to *target*.

    *target* may be a class, an ABC, an unparameterized generic class, or a
    parameterized generic (``Box[int]``), in which case *type_* must derive from
    that exact specialization.
    """
    if not _is_assignable(type_, target):
        fail(InvalidArgumentError(f"The provided type does not extend {_type_name(target)}.", name))
    return type_


__all__ = [
    "DEFAULT_VIOLATION_MESSAGE",
    "greater_than",
    "invalid_type",
    "less_than",
    "negative",
    "null",
    "null_or_whitespace",
    "out_of_range",
    "violation",
]
