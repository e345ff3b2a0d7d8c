"""HTTP status exception taxonomy.

Each exception stands for exactly one HTTP status code and carries no
payload beyond it. They subclass ``fastapi.HTTPException`` so that raising
one from a handler or dependency is picked up by the host framework's
exception-to-response mapping.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import ClassVar, Mapping

from fastapi import HTTPException


class StatusError(HTTPException):
    """Base class for payload-free status exceptions."""

    status: ClassVar[HTTPStatus]

    def __init__(self) -> None:
        super().__init__(status_code=int(self.status), detail=self.status.phrase)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BadRequest(StatusError):
    status = HTTPStatus.BAD_REQUEST


class Unauthorized(StatusError):
    status = HTTPStatus.UNAUTHORIZED


class PaymentRequired(StatusError):
    status = HTTPStatus.PAYMENT_REQUIRED


class Forbidden(StatusError):
    status = HTTPStatus.FORBIDDEN


class NotFound(StatusError):
    status = HTTPStatus.NOT_FOUND


class MethodNotAllowed(StatusError):
    status = HTTPStatus.METHOD_NOT_ALLOWED


class NotAcceptable(StatusError):
    status = HTTPStatus.NOT_ACCEPTABLE


class RequestTimeOut(StatusError):
    status = HTTPStatus.REQUEST_TIMEOUT


class Conflict(StatusError):
    status = HTTPStatus.CONFLICT


class PreconditionFailed(StatusError):
    status = HTTPStatus.PRECONDITION_FAILED


class TooManyRequests(StatusError):
    status = HTTPStatus.TOO_MANY_REQUESTS


class InternalServerError(StatusError):
    status = HTTPStatus.INTERNAL_SERVER_ERROR


class NotImplementedStatus(StatusError):
    """501; named so the builtin ``NotImplemented`` stays unshadowed."""

    status = HTTPStatus.NOT_IMPLEMENTED


class BadGateway(StatusError):
    status = HTTPStatus.BAD_GATEWAY


class ServiceUnavailable(StatusError):
    status = HTTPStatus.SERVICE_UNAVAILABLE


STATUS_ERRORS: Mapping[int, type[StatusError]] = {
    int(cls.status): cls
    for cls in (
        BadRequest,
        Unauthorized,
        PaymentRequired,
        Forbidden,
        NotFound,
        MethodNotAllowed,
        NotAcceptable,
        RequestTimeOut,
        Conflict,
        PreconditionFailed,
        TooManyRequests,
        InternalServerError,
        NotImplementedStatus,
        BadGateway,
        ServiceUnavailable,
    )
}


def status_error_for(status_code: int) -> type[StatusError]:
    """Look up the exception class for a status code.

    Raises:
        ValueError: If no exception is defined for ``status_code``.
    """
    try:
        return STATUS_ERRORS[status_code]
    except KeyError:
        raise ValueError(f"No status exception for HTTP {status_code}") from None
