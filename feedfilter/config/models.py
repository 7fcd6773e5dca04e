"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class FilterConfig(BaseModel):
    """Keyword filter settings."""

    keywords: Optional[str] = Field(
        None,
        description=(
            "Filter query: comma-separated terms, quoted phrases, '-' to exclude, "
            "except(...) groups to reinstate excluded items"
        ),
    )

    @field_validator("keywords", mode="before")
    @classmethod
    def coerce_keywords(cls, v):
        """Accept a YAML list of fragments as a comma-joined query."""
        if isinstance(v, list):
            return ",".join(str(part) for part in v)
        return v


class PipelineConfig(BaseModel):
    """Filter pipeline runtime settings."""

    max_workers: int = Field(
        1, ge=1, le=64, description="Worker threads used to evaluate items (1 = sequential)"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for feedfilter."""

    filter: FilterConfig = Field(default_factory=FilterConfig, description="Keyword filter")
    pipeline: PipelineConfig = Field(
        default_factory=PipelineConfig, description="Pipeline settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
