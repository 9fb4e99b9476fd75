"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from pythonjsonlogger import jsonlogger

from .config import ObservabilityConfig, get_config

ROOT_LOGGER_NAME = "metro_router"


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this more than once replaces the previous handler, so the
    CLI and tests can reconfigure freely.

    Args:
        config: Logging settings; defaults to the application config.

    Returns:
        The configured package logger.
    """
    config = config or get_config().observability
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, "_metro_router", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(jsonlogger.JsonFormatter(config.format))
    else:
        handler.setFormatter(logging.Formatter(config.format))
    handler._metro_router = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(_parse_level(config.level))
    return logger
