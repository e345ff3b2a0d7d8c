"""FastAPI integration for status exceptions.

Usage:
    from fastapi import FastAPI
    from http_adapters.adapters.inbound.rest_api import install_exception_handlers

    app = FastAPI()
    install_exception_handlers(app)

FastAPI already maps any ``HTTPException`` to its status code with a
``{"detail": ...}`` body. Installing this handler makes status exceptions
produce empty-bodied responses instead, and logs and counts them.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from starlette.responses import Response

from http_adapters.domain.entities.status import StatusError
from http_adapters.infrastructure.logging import get_logger
from http_adapters.infrastructure.metrics import get_metrics

logger = get_logger("rest_api")


async def status_error_handler(request: Request, exc: StatusError) -> Response:
    """Convert a status exception into an empty response with its code."""
    get_metrics().status_errors.labels(status_code=str(exc.status_code)).inc()

    log = logger.warning if exc.status_code >= 500 else logger.info
    log(
        "status_error",
        error=type(exc).__name__,
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
    )

    return Response(status_code=exc.status_code, headers=exc.headers)


def install_exception_handlers(app: FastAPI) -> FastAPI:
    """Register the status exception handler on ``app``.

    Args:
        app: Application to configure.

    Returns:
        The same application, for chaining.
    """
    app.add_exception_handler(StatusError, status_error_handler)
    return app
