"""Configuration for the against package (pydantic-settings)."""

from against.config.settings import (
    GuardSettings,
    LoggingSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = ["GuardSettings", "LoggingSettings", "Settings", "get_settings", "reload_settings"]
