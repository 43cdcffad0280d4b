"""Shared utilities and helpers for the against package."""

from against.utils.extensions import (
    every_base_type,
    is_greater_than,
    is_less_than,
    not_all,
    orig_bases,
)
from against.utils.logging import configure_logging

__all__ = [
    "configure_logging",
    "every_base_type",
    "is_greater_than",
    "is_less_than",
    "not_all",
    "orig_bases",
]
