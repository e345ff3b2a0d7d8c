"""Structured logging for HTTP adapters.

Records are emitted on the ``http_adapters`` logger tree. ``setup_logging``
attaches one handler there and leaves the host's root logger alone.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from http_adapters.infrastructure.config import ObservabilityConfig

PACKAGE_LOGGER = "http_adapters"


def add_package_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    event_dict.setdefault("package", PACKAGE_LOGGER)
    return event_dict


def setup_logging(settings: ObservabilityConfig) -> logging.Logger:
    """Route adapter log records through a structlog formatter on stdout."""
    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_package_context,
    ]

    if settings.log_format == "json":
        renderers: list[Processor] = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(settings.log_level)
    package_logger.propagate = False
    return package_logger


def teardown_logging() -> None:
    """Detach the package handler and hand records back to the root logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Lazy logger for one adapter component; resolved on first use."""
    return structlog.get_logger(f"{PACKAGE_LOGGER}.{name}", component=name)
