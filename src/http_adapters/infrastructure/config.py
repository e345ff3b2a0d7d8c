"""Configuration management for HTTP adapters using Pydantic Settings."""

from __future__ import annotations

import codecs
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReaderConfig(BaseModel):
    """Request body reader configuration."""

    json_media_type: str = Field(default="application/json", description="Content-Type accepted by JSON readers")
    text_encoding: str = Field(default="utf-8")
    decode_errors: Literal["replace", "strict"] = Field(
        default="replace", description="How undecodable body bytes are handled"
    )

    @field_validator("text_encoding")
    @classmethod
    def validate_text_encoding(cls, v: str) -> str:
        """Reject codecs Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}") from None
        return v


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")
    otlp_endpoint: str = ""
    environment: str = "development"
    enable_tracing: bool = True


class Config(BaseSettings):
    """Root configuration for HTTP adapters."""

    model_config = SettingsConfigDict(
        env_prefix="HTTP_ADAPTERS_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config()
