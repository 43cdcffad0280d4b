"""Pytest configuration and shared fixtures."""

from typing import Iterator

import pytest
import structlog

from against.config import settings as settings_module


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "logging: tests that configure structlog or the root logger")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Each test starts without a cached settings instance and with default structlog config."""
    monkeypatch.setattr(settings_module, "_settings", None)
    yield
    structlog.reset_defaults()
