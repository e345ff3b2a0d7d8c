"""Inbound adapters: body readers, response helpers and FastAPI wiring."""

from http_adapters.adapters.inbound.readers import (
    OptionalJSONArrayBody,
    OptionalJSONObjectBody,
    OptionalStringBody,
    RequiredJSONArrayBody,
    RequiredJSONObjectBody,
    RequiredStringBody,
)
from http_adapters.adapters.inbound.responses import (
    ACCEPTED,
    BAD_GATEWAY,
    SERVICE_UNAVAILABLE,
    JsonResponseSerializer,
    json_response,
    option_response,
)
from http_adapters.adapters.inbound.rest_api import install_exception_handlers

__all__ = [
    "RequiredStringBody",
    "OptionalStringBody",
    "RequiredJSONObjectBody",
    "RequiredJSONArrayBody",
    "OptionalJSONObjectBody",
    "OptionalJSONArrayBody",
    "ACCEPTED",
    "BAD_GATEWAY",
    "SERVICE_UNAVAILABLE",
    "option_response",
    "json_response",
    "JsonResponseSerializer",
    "install_exception_handlers",
]
