"""Configuration management for chainval using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILE_NAME = ".chainval.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class MessagesConfig(BaseModel):
    """Error message configuration section."""
    default_label: str = Field(alias="defaultLabel", default="value")
    include_value: bool = Field(alias="includeValue", default=True)

    @field_validator("default_label")
    @classmethod
    def validate_default_label(cls, v):
        if not v.strip():
            raise ValueError("default_label must not be blank")
        return v

    model_config = ConfigDict(populate_by_name=True)


class AggregateConfig(BaseModel):
    """Aggregator configuration section."""
    positional_marker: str = Field(alias="positionalMarker", default="#")

    @field_validator("positional_marker")
    @classmethod
    def validate_positional_marker(cls, v):
        if not v:
            raise ValueError("positional_marker must not be empty")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class ChainvalConfig(BaseModel):
    """Complete chainval configuration model."""
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    aggregate: AggregateConfig = Field(default_factory=AggregateConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid", frozen=True)


def load_config(config_path: str | Path | None = None) -> ChainvalConfig:
    """Read settings from ``config_path`` or the nearest .chainval.json.

    Built-in defaults apply when no file exists. Unreadable JSON or
    settings the models reject raise ValueError.
    """
    path = find_config_file() if config_path is None else Path(config_path)
    if path is None or not path.exists():
        return ChainvalConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}")

    try:
        return ChainvalConfig(**data)
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Failed to load config from {path}: {e}")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Closest .chainval.json in ``start_dir`` (default: cwd) or its parents."""
    start = Path(start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate
    return None


def configure_logging(config: ChainvalConfig) -> None:
    """Apply the configured level to the chainval package logger."""
    level = _LOG_LEVELS[LogLevel(config.logging.level)]
    logging.getLogger("chainval").setLevel(level)
