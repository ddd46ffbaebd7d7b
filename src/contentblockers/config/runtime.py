"""Pydantic-based runtime settings for rule set processing.

Loads from environment variables prefixed ``CONTENT_BLOCKERS_`` (with an
optional .env file). Invalid values fail fast when settings are built.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class RuntimeSettings(BaseSettings):
    """Configuration for encoding and analysing rule sets."""

    model_config = {
        "env_prefix": "CONTENT_BLOCKERS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # --- Encoding ---
    canonical_order: bool = Field(
        default=True,
        description="Sort rules into canonical order before encoding",
    )
    json_indent: int | None = Field(
        default=None,
        description="Indentation for JSON text output; None writes a single line",
    )
    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in JSON text output",
    )

    # --- Observability ---
    log_operations: bool = Field(
        default=True,
        description="Emit a structured log record for each rule set operation",
    )

    @field_validator("json_indent")
    @classmethod
    def _indent_range(cls, v: int | None) -> int | None:
        if v is not None and not (0 <= v <= 8):
            raise ValueError(f"json_indent must be 0-8, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
