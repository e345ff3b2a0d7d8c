"""Pytest configuration and shared fixtures for HTTP adapter tests."""

from typing import Callable, Optional

import pytest
from starlette.requests import Request

from http_adapters.infrastructure.config import Config, get_config
from http_adapters.infrastructure.observability import reset_observability


@pytest.fixture(autouse=True)
def reset_observability_state():
    """Reset observability wiring and cached config around each test."""
    reset_observability()
    get_config.cache_clear()
    yield
    reset_observability()
    get_config.cache_clear()


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration."""
    return Config()


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Build a Starlette request with a fully buffered body."""

    def _make(body: bytes = b"", headers: Optional[dict[str, str]] = None, method: str = "POST") -> Request:
        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]
        scope = {
            "type": "http",
            "method": method,
            "path": "/",
            "query_string": b"",
            "headers": raw_headers,
        }

        async def receive():
            return {"type": "http.request", "body": body, "more_body": False}

        return Request(scope, receive)

    return _make


@pytest.fixture
def json_request(make_request) -> Callable[[bytes], Request]:
    """Build an ``application/json`` request for the given body."""

    def _make(body: bytes) -> Request:
        return make_request(
            body,
            {"Content-Type": "application/json", "Content-Length": str(len(body))},
        )

    return _make


# Pytest markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
