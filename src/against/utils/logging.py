"""Structured logging setup (structlog)."""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from against.config.settings import LoggingSettings, get_settings


def configure_logging(settings: Optional[LoggingSettings] = None, **kwargs: Any) -> LoggingSettings:
    """
    Configure structlog and the stdlib root logger from LoggingSettings.

    Keyword overrides (log_level, log_format, log_file) replace individual fields
    of *settings* (default: the global settings' logging section). Returns the
    effective LoggingSettings.
    """
    base = settings or get_settings().logging
    effective = LoggingSettings.model_validate({**base.model_dump(), **kwargs}) if kwargs else base
    level = getattr(logging, effective.log_level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if effective.log_file:
        handlers.append(logging.FileHandler(effective.log_file, encoding="utf-8"))
    logging.basicConfig(format="%(message)s", level=level, handlers=handlers, force=True)

    renderer: Any
    if effective.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    return effective
