"""Pytest fixtures for unit tests."""

from typing import Iterator, List

import pytest


class CountingIterable:
    """Iterable that records how many times it has been enumerated."""

    def __init__(self, items: List[object]) -> None:
        self.items = list(items)
        self.enumerations = 0

    def __iter__(self) -> Iterator[object]:
        self.enumerations += 1
        yield from self.items


def flaky(items: List[object], fail_at: int, error: Exception) -> Iterator[object]:
    """Generator that yields *items* but raises *error* before yielding index *fail_at*."""
    for index, item in enumerate(items):
        if index == fail_at:
            raise error
        yield item


@pytest.fixture
def counting_iterable() -> CountingIterable:
    return CountingIterable([1, 2, 3])


@pytest.fixture
def is_even():
    return lambda n: n % 2 == 0


@pytest.fixture
def make_flaky():
    return flaky
