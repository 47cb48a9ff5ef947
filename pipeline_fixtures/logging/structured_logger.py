"""Structured logging for suite declaration and fixture population.

Every event is stamped with the benchmark namespace it belongs to. Events
emitted while a suite is declared or a test case is set up or torn down also
carry the suite or test case name, so a slow or failing populator can be
traced back to the benchmark that triggered it.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog
from structlog.types import EventDict, Processor

from pipeline_fixtures.config import get_settings

APP_NAME = "pipeline-fixtures"


class FixtureContext:
    """Processor adding the app name and benchmark namespace to events.

    Values bound explicitly on the logger or in the context win.
    """

    def __init__(self, namespace: str):
        self.namespace = namespace

    def __call__(self, logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("app", APP_NAME)
        event_dict.setdefault("namespace", self.namespace)
        return event_dict


def configure_logging(
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
    namespace: Optional[str] = None,
) -> None:
    """Configure structlog for a benchmark run.

    Unset arguments fall back to ``FixtureSettings``.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines instead of console output
        namespace: Benchmark namespace stamped on every event
    """
    settings = get_settings()
    if log_level is None:
        log_level = settings.log_level
    if json_logs is None:
        json_logs = settings.json_logs

    renderer: Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            FixtureContext(settings.namespace if namespace is None else namespace),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


class LoggerMixin:
    """Mixin to add structured logging to classes."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Logger bound to the concrete class name."""
        return get_logger(self.__class__.__name__)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Bind ``kwargs`` to every event logged inside the block.

    Previous values of the same keys are restored on exit, so nested
    blocks (a test case inside a suite) compose.
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield
