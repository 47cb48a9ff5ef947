"""Structured logging module using structlog."""

from .structured_logger import (
    FixtureContext,
    LoggerMixin,
    configure_logging,
    get_logger,
    log_context,
)

__all__ = [
    "FixtureContext",
    "LoggerMixin",
    "configure_logging",
    "get_logger",
    "log_context",
]
