"""Domain services."""

from http_adapters.domain.services.body_classifier import BodyClassifier, parse_content_length

__all__ = [
    "BodyClassifier",
    "parse_content_length",
]
