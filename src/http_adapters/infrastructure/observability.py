"""One-time observability setup for applications using the adapters.

Usage:
    from contextlib import asynccontextmanager
    from http_adapters import configure_observability

    @asynccontextmanager
    async def lifespan(app):
        configure_observability()
        yield

The readers and the exception handler log, count and trace whether or not
this is called; it only decides where logs and spans go.
"""

from dataclasses import dataclass
from typing import Optional

from opentelemetry import trace

from http_adapters.infrastructure.config import Config, get_config
from http_adapters.infrastructure.logging import get_logger, setup_logging, teardown_logging
from http_adapters.infrastructure.metrics import AdapterMetrics, get_metrics
from http_adapters.infrastructure.tracing import setup_tracing


@dataclass(frozen=True)
class Observability:
    """Settings and sinks the adapters were configured with."""

    config: Config
    tracer: trace.Tracer
    metrics: AdapterMetrics


_configured: Optional[Observability] = None


def configure_observability(config: Optional[Config] = None) -> Observability:
    """Set up logging and tracing once; later calls return the first result."""
    global _configured
    if _configured is not None:
        return _configured

    config = config or get_config()
    setup_logging(config.observability)
    _configured = Observability(
        config=config,
        tracer=setup_tracing(config.observability),
        metrics=get_metrics(),
    )

    get_logger("observability").info(
        "http_adapters_configured",
        environment=config.observability.environment,
        log_format=config.observability.log_format,
        json_media_type=config.reader.json_media_type,
        tracing=config.observability.enable_tracing,
    )
    return _configured


def reset_observability() -> None:
    """Forget the configuration and detach the package log handler."""
    global _configured
    _configured = None
    teardown_logging()
