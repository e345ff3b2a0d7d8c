"""Domain entities."""

from http_adapters.domain.entities.body import (
    BodyShape,
    JsonArray,
    JsonBody,
    JsonObject,
    ReadOutcome,
    RejectionReason,
)
from http_adapters.domain.entities.status import (
    STATUS_ERRORS,
    BadGateway,
    BadRequest,
    Conflict,
    Forbidden,
    InternalServerError,
    MethodNotAllowed,
    NotAcceptable,
    NotFound,
    NotImplementedStatus,
    PaymentRequired,
    PreconditionFailed,
    RequestTimeOut,
    ServiceUnavailable,
    StatusError,
    TooManyRequests,
    Unauthorized,
    status_error_for,
)

__all__ = [
    "BodyShape",
    "JsonArray",
    "JsonBody",
    "JsonObject",
    "ReadOutcome",
    "RejectionReason",
    "StatusError",
    "STATUS_ERRORS",
    "status_error_for",
    "BadRequest",
    "Unauthorized",
    "PaymentRequired",
    "Forbidden",
    "NotFound",
    "MethodNotAllowed",
    "NotAcceptable",
    "RequestTimeOut",
    "Conflict",
    "PreconditionFailed",
    "TooManyRequests",
    "InternalServerError",
    "NotImplementedStatus",
    "BadGateway",
    "ServiceUnavailable",
]
