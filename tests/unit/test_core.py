"""Unit tests for body classification, status exceptions and response helpers."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone

import pytest
from fastapi import HTTPException
from pydantic_core import PydanticSerializationError
from starlette.background import BackgroundTask, BackgroundTasks

from http_adapters.adapters.inbound.responses import (
    ACCEPTED,
    BAD_GATEWAY,
    SERVICE_UNAVAILABLE,
    JsonResponseSerializer,
    json_response,
    option_response,
)
from http_adapters.domain.entities.body import BodyShape, ReadOutcome, RejectionReason
from http_adapters.domain.entities.status import (
    STATUS_ERRORS,
    BadGateway,
    BadRequest,
    NotFound,
    NotImplementedStatus,
    ServiceUnavailable,
    StatusError,
    TooManyRequests,
    status_error_for,
)
from http_adapters.domain.services.body_classifier import BodyClassifier, parse_content_length


@pytest.mark.unit
class TestContentLength:
    """Test Content-Length header parsing."""

    def test_absent_header(self):
        assert parse_content_length(None) is None

    def test_numeric_header(self):
        assert parse_content_length("42") == 42
        assert parse_content_length(" 7 ") == 7

    def test_invalid_header(self):
        assert parse_content_length("abc") is None
        assert parse_content_length("") is None


@pytest.mark.unit
class TestBodyClassifierText:
    """Test plain text classification."""

    def test_positive_length_yields_text(self):
        """Test a declared body is decoded as UTF-8."""
        outcome = BodyClassifier().classify_text(5, "héllo".encode("utf-8"))
        assert outcome.accepted
        assert outcome.value == "héllo"

    @pytest.mark.parametrize("length", [None, 0, -1])
    def test_missing_length_rejected(self, length):
        """Test absent or non-positive lengths mean no body."""
        outcome = BodyClassifier().classify_text(length, b"ignored")
        assert not outcome.accepted
        assert outcome.reason is RejectionReason.MISSING_BODY

    def test_invalid_utf8_replaced_by_default(self):
        """Test undecodable bytes are replaced rather than rejected."""
        outcome = BodyClassifier().classify_text(2, b"\xff\xfe")
        assert outcome.accepted
        assert outcome.value == "\ufffd\ufffd"

    def test_invalid_utf8_strict(self):
        """Test strict decoding rejects undecodable bytes."""
        outcome = BodyClassifier(errors="strict").classify_text(2, b"\xff\xfe")
        assert outcome.reason is RejectionReason.UNDECODABLE


@pytest.mark.unit
class TestBodyClassifierJSON:
    """Test JSON classification."""

    def test_object_body(self):
        """Test an object body matches the object shape."""
        outcome = BodyClassifier().classify_json("application/json", b'{"a": 1}', BodyShape.OBJECT)
        assert outcome == ReadOutcome.of({"a": 1})

    def test_array_body(self):
        """Test an array body matches the array shape."""
        outcome = BodyClassifier().classify_json("application/json", b"[1, 2, 3]", BodyShape.ARRAY)
        assert outcome.value == [1, 2, 3]

    def test_object_preserves_key_order(self):
        """Test parsed objects keep document key order."""
        outcome = BodyClassifier().classify_json(
            "application/json", b'{"z": 1, "a": 2, "m": 3}', BodyShape.OBJECT
        )
        assert list(outcome.value) == ["z", "a", "m"]

    def test_wrong_shape(self):
        """Test an array body does not satisfy the object shape and vice versa."""
        classifier = BodyClassifier()
        assert classifier.classify_json("application/json", b"[]", BodyShape.OBJECT).reason is RejectionReason.SHAPE
        assert classifier.classify_json("application/json", b"{}", BodyShape.ARRAY).reason is RejectionReason.SHAPE

    @pytest.mark.parametrize("body", [b"1", b'"text"', b"true", b"null", b"3.5"])
    def test_scalar_top_level_is_shape_mismatch(self, body):
        """Test scalars are neither objects nor arrays."""
        classifier = BodyClassifier()
        assert classifier.classify_json("application/json", body, BodyShape.OBJECT).reason is RejectionReason.SHAPE
        assert classifier.classify_json("application/json", body, BodyShape.ARRAY).reason is RejectionReason.SHAPE

    @pytest.mark.parametrize(
        "body",
        [b"", b"{", b"{'a': 1}", b"[1,]x", b"[NaN]", b'{"a": Infinity}', b"[-Infinity]"],
    )
    def test_malformed(self, body):
        """Test unparsable bodies are classified as malformed."""
        outcome = BodyClassifier().classify_json("application/json", body, BodyShape.OBJECT)
        assert outcome.reason is RejectionReason.MALFORMED

    def test_deeply_nested_is_malformed(self):
        """Test nesting beyond the parser's recursion limit is malformed, not a crash."""
        body = b"[" * 100000 + b"]" * 100000
        outcome = BodyClassifier().classify_json("application/json", body, BodyShape.ARRAY)
        assert outcome.reason is RejectionReason.MALFORMED

    @pytest.mark.parametrize(
        "content_type",
        [None, "text/plain", "application/json; charset=utf-8", "APPLICATION/JSON"],
    )
    def test_content_type_must_match_exactly(self, content_type):
        """Test only the exact JSON media type is accepted."""
        outcome = BodyClassifier().classify_json(content_type, b'{"a": 1}', BodyShape.OBJECT)
        assert outcome.reason is RejectionReason.CONTENT_TYPE

    def test_custom_media_type(self):
        """Test the accepted media type is configurable."""
        classifier = BodyClassifier(json_media_type="application/vnd.api+json")
        outcome = classifier.classify_json("application/vnd.api+json", b"{}", BodyShape.OBJECT)
        assert outcome.accepted


@pytest.mark.unit
class TestStatusTaxonomy:
    """Test the status exception classes."""

    def test_fifteen_status_codes(self):
        """Test exactly the supported codes have exception classes."""
        assert sorted(STATUS_ERRORS) == [
            400, 401, 402, 403, 404, 405, 406, 408, 409, 412, 429, 500, 501, 502, 503,
        ]

    def test_exceptions_carry_only_status(self):
        """Test each exception is an HTTPException with its own code."""
        for code, cls in STATUS_ERRORS.items():
            exc = cls()
            assert isinstance(exc, StatusError)
            assert isinstance(exc, HTTPException)
            assert exc.status_code == code
            assert exc.headers is None

    def test_detail_is_reason_phrase(self):
        assert BadRequest().detail == "Bad Request"
        assert TooManyRequests().detail == "Too Many Requests"

    def test_lookup_by_code(self):
        assert status_error_for(404) is NotFound
        assert status_error_for(501) is NotImplementedStatus
        assert status_error_for(502) is BadGateway
        assert status_error_for(503) is ServiceUnavailable

    def test_lookup_unknown_code(self):
        with pytest.raises(ValueError, match="418"):
            status_error_for(418)

    def test_raise_and_catch(self):
        """Test handler code can raise and catch by class."""
        with pytest.raises(NotFound) as exc_info:
            raise NotFound()
        assert exc_info.value.status_code == 404
        assert repr(exc_info.value) == "NotFound()"


@pytest.mark.unit
class TestOptionResponse:
    """Test the absent-value-to-404 adapter."""

    def test_present_value_unchanged(self):
        value = {"id": 1}
        assert option_response(value) is value

    @pytest.mark.parametrize("value", [0, "", [], False])
    def test_falsy_values_are_present(self, value):
        assert option_response(value) == value

    def test_absent_value_raises_not_found(self):
        with pytest.raises(NotFound):
            option_response(None)


@dataclass
class _Widget:
    name: str
    created: datetime


@pytest.mark.unit
class TestJsonResponse:
    """Test the JSON response serializer."""

    def test_status_and_content_type(self):
        """Test the response is a 200 JSON response."""
        response = json_response({"a": 1})
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert json.loads(response.body) == {"a": 1}

    def test_serializes_generic_objects(self):
        """Test dataclasses and datetimes go through the generic serializer."""
        widget = _Widget(name="gear", created=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        response = json_response([widget])
        assert json.loads(response.body) == [{"name": "gear", "created": "2024-01-02T03:04:05Z"}]

    def test_scalar_payload(self):
        assert json.loads(json_response(None).body) is None
        assert json.loads(json_response("ok").body) == "ok"

    def test_serializer_errors_propagate(self):
        """Test unserializable values are not swallowed."""
        with pytest.raises(PydanticSerializationError):
            json_response(object())

    def test_callable_serializer(self):
        response = JsonResponseSerializer([1, 2])
        assert response.status_code == 200
        assert json.loads(response.body) == [1, 2]


@pytest.mark.unit
class TestStatusResponses:
    """Test the shared empty status responses."""

    @pytest.mark.parametrize(
        "response, code",
        [(ACCEPTED, 202), (BAD_GATEWAY, 502), (SERVICE_UNAVAILABLE, 503)],
    )
    def test_empty_status_response(self, response, code):
        assert response.status_code == code
        assert response.body == b""
        assert response.headers["content-length"] == "0"

    def test_shared_response_rejects_background_task(self):
        """Test a per-request background task cannot attach to a shared response."""
        with pytest.raises(RuntimeError, match=r"Response\(status_code=202\)"):
            ACCEPTED.background = BackgroundTask(lambda: None)
        assert ACCEPTED.background is None

    def test_shared_response_accepts_empty_background_tasks(self):
        """Test an empty task list, as FastAPI passes when nothing was queued, is allowed."""
        ACCEPTED.background = BackgroundTasks()
        assert ACCEPTED.background is None
