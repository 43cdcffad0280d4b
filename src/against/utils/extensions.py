"""Small predicates and introspection helpers the guards are written in terms of."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Tuple, TypeVar

T = TypeVar("T")


def not_all(iterable: Iterable[T], predicate: Callable[[T], Any]) -> bool:
    """True when at least one element does not satisfy *predicate*. Empty input is False."""
    return not all(predicate(element) for element in iterable)


def is_less_than(a: Any, b: Any) -> bool:
    return a < b


def is_greater_than(a: Any, b: Any) -> bool:
    return a > b


def every_base_type(cls: type) -> Tuple[type, ...]:
    """Return *cls* followed by all of its ancestors, nearest first (the MRO)."""
    return tuple(cls.__mro__)


def orig_bases(cls: type) -> Tuple[Any, ...]:
    """Generic specializations declared directly in the bases of *cls* (e.g. ``Box[int]``)."""
    # __orig_bases__ is inherited through attribute lookup; only the class's own counts
    return tuple(cls.__dict__.get("__orig_bases__", ()))


__all__ = ["every_base_type", "is_greater_than", "is_less_than", "not_all", "orig_bases"]
