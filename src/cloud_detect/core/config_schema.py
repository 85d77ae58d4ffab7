"""Pydantic models for config validation.

``Config.validated()`` returns a typed ``CloudDetectConfig``. Dict-based
access through ``Config.get()`` keeps working unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DetectionConfig(BaseModel):
    """Settings for a whole detection run."""

    timeout: float = Field(default=5.0, gt=0)
    """Overall deadline in seconds."""

    providers: list[str] = []
    """Provider names to put in the roster. Empty means every built-in provider."""

    @field_validator("providers", mode="before")
    @classmethod
    def _split_names(cls, v: Any) -> Any:
        # Env overrides arrive as "aws,gcp"
        if v is None:
            return []
        if isinstance(v, str):
            return [name.strip().lower() for name in v.split(",") if name.strip()]
        if isinstance(v, list | tuple):
            return [str(name).strip().lower() for name in v]
        return v


class HttpConfig(BaseModel):
    """Metadata-request settings shared by every probe."""

    timeout: float = Field(default=5.0, gt=0)


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    file: str | None = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


class CloudDetectConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    detection: DetectionConfig = DetectionConfig()
    http: HttpConfig = HttpConfig()
    logging: LoggingConfig = LoggingConfig()
