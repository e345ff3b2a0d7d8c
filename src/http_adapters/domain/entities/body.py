"""Request body value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

JsonObject = dict[str, Any]
JsonArray = list[Any]
JsonBody = Union[JsonObject, JsonArray]


class BodyShape(str, Enum):
    """Top-level JSON shapes a reader can expect."""
    OBJECT = "object"
    ARRAY = "array"

    @property
    def python_type(self) -> type:
        return dict if self is BodyShape.OBJECT else list


class RejectionReason(str, Enum):
    """Why a body did not yield a value."""
    MISSING_BODY = "missing_body"
    UNDECODABLE = "undecodable"
    CONTENT_TYPE = "content_type"
    MALFORMED = "malformed"
    SHAPE = "shape"


@dataclass(frozen=True)
class ReadOutcome:
    """Result of classifying one request body.

    Exactly one of ``value`` and ``reason`` is meaningful: an outcome with no
    rejection reason carries the decoded value.
    """

    value: Any = None
    reason: Optional[RejectionReason] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @classmethod
    def of(cls, value: Any) -> ReadOutcome:
        return cls(value=value)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> ReadOutcome:
        return cls(reason=reason)
