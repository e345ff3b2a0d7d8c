"""Body classification: decides whether a buffered body yields a value.

The classifier is pure and synchronous. It never raises for client input;
every failure comes back as a ``ReadOutcome`` carrying a rejection reason, and
the readers decide whether that reason is an error or an absent value.
"""

from __future__ import annotations

import json
from typing import Optional

from http_adapters.domain.entities.body import BodyShape, ReadOutcome, RejectionReason


def parse_content_length(header: Optional[str]) -> Optional[int]:
    """Parse a ``Content-Length`` header value.

    Returns None when the header is absent or not an integer.
    """
    if header is None:
        return None
    try:
        return int(header.strip())
    except ValueError:
        return None


def _reject_constant(name: str) -> None:
    # NaN and Infinity are accepted by the stdlib parser but are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class BodyClassifier:
    """Classifies raw request bodies as text or JSON values."""

    def __init__(
        self,
        json_media_type: str = "application/json",
        encoding: str = "utf-8",
        errors: str = "replace",
    ) -> None:
        self.json_media_type = json_media_type
        self.encoding = encoding
        self.errors = errors

    def decode(self, raw: bytes) -> Optional[str]:
        """Decode body bytes, or None if they cannot be decoded."""
        try:
            return raw.decode(self.encoding, self.errors)
        except UnicodeDecodeError:
            return None

    def classify_text(self, content_length: Optional[int], raw: bytes) -> ReadOutcome:
        """Classify a plain text body.

        A body is present only when the declared content length is positive.
        """
        if content_length is None or content_length <= 0:
            return ReadOutcome.rejected(RejectionReason.MISSING_BODY)

        text = self.decode(raw)
        if text is None:
            return ReadOutcome.rejected(RejectionReason.UNDECODABLE)
        return ReadOutcome.of(text)

    def classify_json(
        self, content_type: Optional[str], raw: bytes, shape: BodyShape
    ) -> ReadOutcome:
        """Classify a JSON body expected to have the given top-level shape."""
        if content_type != self.json_media_type:
            return ReadOutcome.rejected(RejectionReason.CONTENT_TYPE)

        text = self.decode(raw)
        if text is None:
            return ReadOutcome.rejected(RejectionReason.UNDECODABLE)

        try:
            parsed = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            return ReadOutcome.rejected(RejectionReason.MALFORMED)

        # Scalars fall through here as well as the other container shape
        if not isinstance(parsed, shape.python_type):
            return ReadOutcome.rejected(RejectionReason.SHAPE)
        return ReadOutcome.of(parsed)
