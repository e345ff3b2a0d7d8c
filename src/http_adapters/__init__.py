"""Request/response adapters for FastAPI and Starlette handlers.

Typed body readers, status exceptions, pre-built status responses, an
absent-value-to-404 adapter and a JSON response serializer.
"""

from http_adapters.adapters.inbound import (
    ACCEPTED,
    BAD_GATEWAY,
    SERVICE_UNAVAILABLE,
    JsonResponseSerializer,
    OptionalJSONArrayBody,
    OptionalJSONObjectBody,
    OptionalStringBody,
    RequiredJSONArrayBody,
    RequiredJSONObjectBody,
    RequiredStringBody,
    install_exception_handlers,
    json_response,
    option_response,
)
from http_adapters.domain.entities import (
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
from http_adapters.infrastructure.observability import configure_observability
from http_adapters.ports.inbound import HttpEndpoint, RequestReader

__version__ = "0.1.0"

__all__ = [
    # Readers
    "RequestReader",
    "RequiredStringBody",
    "OptionalStringBody",
    "RequiredJSONObjectBody",
    "RequiredJSONArrayBody",
    "OptionalJSONObjectBody",
    "OptionalJSONArrayBody",
    # Responses
    "HttpEndpoint",
    "ACCEPTED",
    "BAD_GATEWAY",
    "SERVICE_UNAVAILABLE",
    "option_response",
    "json_response",
    "JsonResponseSerializer",
    "install_exception_handlers",
    "configure_observability",
    # Status exceptions
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
