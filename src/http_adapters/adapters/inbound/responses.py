"""Outbound helpers turning handler results into responses.

Usage:
    from http_adapters import ACCEPTED, json_response, option_response

    @app.get("/users/{user_id}")
    async def get_user(user_id: str):
        return json_response(option_response(repository.find(user_id)))

    @app.post("/jobs")
    async def submit_job():
        queue.put(...)
        return ACCEPTED
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from pydantic_core import to_json
from starlette import status
from starlette.background import BackgroundTask
from starlette.responses import Response

from http_adapters.domain.entities.status import NotFound
from http_adapters.infrastructure.metrics import get_metrics

T = TypeVar("T")

JSON_MEDIA_TYPE = "application/json"


class StatusResponse(Response):
    """Empty-bodied response safe to share between requests.

    FastAPI attaches the request's background tasks to a returned response.
    A shared instance cannot carry them, so attaching pending tasks raises;
    handlers that schedule tasks return their own ``Response``.
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(status_code=status_code)

    @property
    def background(self) -> None:
        return None

    @background.setter
    def background(self, value: Optional[BackgroundTask]) -> None:
        # An empty BackgroundTasks is what FastAPI passes when nothing was queued
        if value is None or getattr(value, "tasks", None) == []:
            return
        raise RuntimeError(
            f"Shared {self.status_code} response cannot run background tasks; "
            f"return Response(status_code={self.status_code}) instead"
        )


ACCEPTED = StatusResponse(status.HTTP_202_ACCEPTED)
BAD_GATEWAY = StatusResponse(status.HTTP_502_BAD_GATEWAY)
SERVICE_UNAVAILABLE = StatusResponse(status.HTTP_503_SERVICE_UNAVAILABLE)


def option_response(value: Optional[T]) -> T:
    """Return ``value`` unchanged, or raise ``NotFound`` if it is None.

    Only None is absent; falsy values such as ``0`` or ``[]`` pass through.
    """
    if value is None:
        raise NotFound()
    return value


def json_response(value: Any) -> Response:
    """Serialize ``value`` into a 200 ``application/json`` response.

    Serialization errors from pydantic-core are not caught.
    """
    body = to_json(value)
    get_metrics().json_responses.inc()
    return Response(content=body, status_code=status.HTTP_200_OK, media_type=JSON_MEDIA_TYPE)


class _JsonResponseSerializer:
    """Callable form of :func:`json_response`, for passing as a service."""

    def __call__(self, value: Any) -> Response:
        return json_response(value)

    def __repr__(self) -> str:
        return "JsonResponseSerializer"


JsonResponseSerializer = _JsonResponseSerializer()


__all__ = [
    "ACCEPTED",
    "BAD_GATEWAY",
    "SERVICE_UNAVAILABLE",
    "JSON_MEDIA_TYPE",
    "StatusResponse",
    "option_response",
    "json_response",
    "JsonResponseSerializer",
]
