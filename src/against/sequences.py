"""
Iterable guards.

An iterable argument is materialized exactly once into an immutable tuple and
wrapped in an IterableValidator, which exposes chainable checks over that buffer:

    items = (
        invalid_iterable(items, name="items")
        .empty()
        .null_elements()
        .any_violation(lambda i: i.quantity > 0, "Every item needs a positive quantity.")
        .validated()
    )

Each check returns the same validator or raises; nothing is re-enumerated no
matter how many checks are chained. empty(), null_elements() and
empty_or_null_elements() are one-call shortcuts for the common chains.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

import structlog

from against.config.settings import get_settings
from against.errors import InvalidArgumentError, fail
from against.scalars import null
from against.utils.extensions import not_all

logger = structlog.get_logger(__name__)

T = TypeVar("T")

DEFAULT_ELEMENT_VIOLATION_MESSAGE = "An element of the provided iterable violates a precondition."


class IterableValidator(Generic[T]):
    """Fluent checks over a materialized iterable argument."""

    __slots__ = ("_elements", "_name")

    def __init__(self, elements: Tuple[T, ...], name: Optional[str] = None) -> None:
        self._elements = elements
        self._name = name

    def empty(self) -> "IterableValidator[T]":
        """Raise InvalidArgumentError if the iterable produced no elements."""
        if not self._elements:
            fail(InvalidArgumentError("The provided iterable is empty.", self._name))
        return self

    def null_elements(self) -> "IterableValidator[T]":
        """Raise InvalidArgumentError if any element is None."""
        if any(element is None for element in self._elements):
            fail(InvalidArgumentError("The provided iterable contains None elements.", self._name))
        return self

    def any_violation(
        self,
        precondition: Callable[[T], Any],
        message: Optional[str] = None,
    ) -> "IterableValidator[T]":
        """
        Raise InvalidArgumentError unless every element satisfies *precondition*.

        *message* describes how the precondition fails and becomes the error message.
        """
        if not_all(self._elements, precondition):
            if message is None:
                message = DEFAULT_ELEMENT_VIOLATION_MESSAGE
            fail(InvalidArgumentError(message, self._name))
        return self

    def validated(self) -> Tuple[T, ...]:
        """Return the materialized elements. Safe to call at any point in the chain."""
        return self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"IterableValidator(name={self._name!r}, elements={len(self._elements)})"


# -----------------------------------------------------------------------------
# Materialization
# -----------------------------------------------------------------------------


def _materialize(iterable: Iterable[T], suppress_errors: bool, name: Optional[str]) -> Tuple[T, ...]:
    """
    Drain *iterable* one pull at a time.

    With *suppress_errors*, an exception raised by a pull ends materialization and
    the elements gathered so far are kept; otherwise it propagates.
    """
    iterator = iter(iterable)
    elements: List[T] = []
    try:
        while True:
            try:
                element = next(iterator)
            except StopIteration:
                break
            except Exception as e:
                if not suppress_errors:
                    raise
                if get_settings().guard.log_suppressed_errors:
                    logger.warning(
                        "iterable_error_suppressed",
                        name=name,
                        error=str(e),
                        error_type=type(e).__name__,
                        collected=len(elements),
                    )
                break
            elements.append(element)
    except BaseException:
        # the pull error is the one the caller sees, not a failure while closing
        try:
            _close(iterator)
        except Exception as close_error:
            if get_settings().guard.log_suppressed_errors:
                logger.debug("iterable_close_failed", name=name, error=str(close_error))
        raise
    _close(iterator)
    return tuple(elements)


def _close(iterator: Iterator[Any]) -> None:
    close = getattr(iterator, "close", None)
    if callable(close):
        close()


def invalid_iterable(
    iterable: Optional[Iterable[T]],
    suppress_errors: bool = False,
    name: Optional[str] = None,
) -> IterableValidator[T]:
    """
    Materialize *iterable* and return an IterableValidator over its elements.

    The iterable is enumerated exactly once, before any check runs. If
    *suppress_errors* is True, an exception raised while pulling an element stops
    enumeration instead of propagating. None raises NullArgumentError.
    """
    null(iterable, name)
    return IterableValidator(_materialize(iterable, suppress_errors, name), name)


# -----------------------------------------------------------------------------
# Shortcuts
# -----------------------------------------------------------------------------


def empty(
    iterable: Optional[Iterable[T]],
    suppress_errors: bool = False,
    name: Optional[str] = None,
) -> Tuple[T, ...]:
    """Return the materialized elements if the iterable produces at least one."""
    return invalid_iterable(iterable, suppress_errors, name).empty().validated()


def null_elements(
    iterable: Optional[Iterable[T]],
    suppress_errors: bool = False,
    name: Optional[str] = None,
) -> Tuple[T, ...]:
    """Return the materialized elements if none of them is None."""
    return invalid_iterable(iterable, suppress_errors, name).null_elements().validated()


def empty_or_null_elements(
    iterable: Optional[Iterable[T]],
    suppress_errors: bool = False,
    name: Optional[str] = None,
) -> Tuple[T, ...]:
    """Return the materialized elements if there is at least one and none is None."""
    return invalid_iterable(iterable, suppress_errors, name).empty().null_elements().validated()


__all__ = [
    "DEFAULT_ELEMENT_VIOLATION_MESSAGE",
    "IterableValidator",
    "empty",
    "empty_or_null_elements",
    "invalid_iterable",
    "null_elements",
]
