"""Inbound ports - contracts handler code uses against the adapter layer.

Readers sit between the framework's request and handler code; endpoints are
the handlers themselves.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, TypeVar

from starlette.requests import Request
from starlette.responses import Response

from http_adapters.domain.entities.body import ReadOutcome

T_co = TypeVar("T_co", covariant=True)


# =============================================================================
# Request Reader Port
# =============================================================================


class RequestReader(Protocol[T_co]):
    """Protocol for extracting a typed value from a request body.

    Readers are async callables so they compose with the host's event loop
    and can be passed to ``fastapi.Depends`` unchanged.

    Failure:
        Required readers raise ``BadRequest``; optional readers return None.

    Example:
        @app.post("/notes")
        async def create_note(body: str = Depends(RequiredStringBody())):
            ...
    """

    @abstractmethod
    async def __call__(self, request: Request) -> T_co:
        """Read the body of ``request``.

        Args:
            request: Incoming request with a buffered body.

        Returns:
            The decoded value, or None for an absent optional body.
        """
        ...

    @abstractmethod
    async def outcome(self, request: Request) -> ReadOutcome:
        """Classify the body of ``request`` without raising.

        Args:
            request: Incoming request with a buffered body.

        Returns:
            Outcome carrying the value or the rejection reason.
        """
        ...


# =============================================================================
# Endpoint Port
# =============================================================================


class HttpEndpoint(Protocol):
    """Protocol for a request handler producing a framework response."""

    @abstractmethod
    async def __call__(self, request: Request) -> Response:
        """Handle ``request``.

        Raises:
            StatusError: To short-circuit with a status response.
        """
        ...


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "RequestReader",
    "HttpEndpoint",
]
