"""Typed request body readers.

Usage:
    from fastapi import Depends, FastAPI
    from http_adapters import OptionalJSONObjectBody, RequiredStringBody

    app = FastAPI()

    @app.put("/notes/{note_id}")
    async def put_note(note_id: str, text: str = Depends(RequiredStringBody())):
        ...

Every reader is an async callable taking a Starlette ``Request``. Required
readers raise ``BadRequest`` when the body is missing or unusable; optional
readers return None in the same situations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from starlette.requests import Request

from http_adapters.domain.entities.body import (
    BodyShape,
    JsonArray,
    JsonObject,
    ReadOutcome,
)
from http_adapters.domain.entities.status import BadRequest
from http_adapters.domain.services.body_classifier import (
    BodyClassifier,
    parse_content_length,
)
from http_adapters.infrastructure.config import ReaderConfig, get_config
from http_adapters.infrastructure.logging import get_logger
from http_adapters.infrastructure.metrics import get_metrics
from http_adapters.infrastructure.tracing import get_tracer

T = TypeVar("T")

logger = get_logger("readers")


class BodyReader(ABC, Generic[T]):
    """Base reader: buffers the body, classifies it, then resolves the outcome."""

    required: bool = True

    def __init__(self, config: Optional[ReaderConfig] = None) -> None:
        config = config or get_config().reader
        self.classifier = BodyClassifier(
            json_media_type=config.json_media_type,
            encoding=config.text_encoding,
            errors=config.decode_errors,
        )

    @property
    def name(self) -> str:
        return type(self).__name__

    async def __call__(self, request: Request) -> T:
        outcome = await self.outcome(request)
        if outcome.accepted:
            return outcome.value
        if self.required:
            raise BadRequest()
        return None  # type: ignore[return-value]

    async def outcome(self, request: Request) -> ReadOutcome:
        with get_tracer().start_as_current_span("read_body") as span:
            span.set_attribute("http_adapters.reader", self.name)
            raw = await request.body()
            outcome = self.classify(request, raw)
            span.set_attribute("http_adapters.accepted", outcome.accepted)
        self._record(outcome, len(raw))
        return outcome

    @abstractmethod
    def classify(self, request: Request, raw: bytes) -> ReadOutcome:
        """Classify the buffered body of a request."""
        ...

    def _record(self, outcome: ReadOutcome, size: int) -> None:
        metrics = get_metrics()
        if outcome.accepted:
            metrics.body_reads.labels(reader=self.name, outcome="value").inc()
            metrics.body_size.labels(reader=self.name).observe(size)
            return

        result = "rejected" if self.required else "absent"
        metrics.body_reads.labels(reader=self.name, outcome=result).inc()
        metrics.body_rejections.labels(reader=self.name, reason=outcome.reason.value).inc()
        logger.debug(
            "request_body_not_usable",
            reader=self.name,
            reason=outcome.reason.value,
            result=result,
            size=size,
        )


class StringBodyReader(BodyReader[T]):
    """Reads the body as text when a positive Content-Length is declared."""

    def classify(self, request: Request, raw: bytes) -> ReadOutcome:
        length = parse_content_length(request.headers.get("content-length"))
        return self.classifier.classify_text(length, raw)


class JSONBodyReader(BodyReader[T]):
    """Reads the body as JSON of one top-level shape."""

    shape: BodyShape

    def classify(self, request: Request, raw: bytes) -> ReadOutcome:
        return self.classifier.classify_json(request.headers.get("content-type"), raw, self.shape)


class RequiredStringBody(StringBodyReader[str]):
    """Body as UTF-8 text; 400 when no positive Content-Length is declared."""

    required = True


class OptionalStringBody(StringBodyReader[Optional[str]]):
    """Body as UTF-8 text, or None when no positive Content-Length is declared."""

    required = False


class RequiredJSONObjectBody(JSONBodyReader[JsonObject]):
    """``application/json`` body holding an object; 400 otherwise."""

    required = True
    shape = BodyShape.OBJECT


class RequiredJSONArrayBody(JSONBodyReader[JsonArray]):
    """``application/json`` body holding an array; 400 otherwise."""

    required = True
    shape = BodyShape.ARRAY


class OptionalJSONObjectBody(JSONBodyReader[Optional[JsonObject]]):
    """``application/json`` body holding an object, or None otherwise."""

    required = False
    shape = BodyShape.OBJECT


class OptionalJSONArrayBody(JSONBodyReader[Optional[JsonArray]]):
    """``application/json`` body holding an array, or None otherwise."""

    required = False
    shape = BodyShape.ARRAY


__all__ = [
    "BodyReader",
    "StringBodyReader",
    "JSONBodyReader",
    "RequiredStringBody",
    "OptionalStringBody",
    "RequiredJSONObjectBody",
    "RequiredJSONArrayBody",
    "OptionalJSONObjectBody",
    "OptionalJSONArrayBody",
]
