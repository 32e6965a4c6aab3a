"""Configuration management for streaming moment tools."""

from __future__ import annotations

from pathlib import Path

import tomllib
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="INFO", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_format: bool = Field(default=True, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    # Maximum size (bytes) before log rotation.
    max_bytes: int = Field(default=1_000_000, ge=1, description="Max log file size before rotation")
    # Number of backup files to retain.
    backup_count: int = Field(default=3, ge=0, description="Number of rotated log files to keep")


class ReaderConfig(BaseModel):
    """Text stream reader settings."""

    # Field separator between the X and Y columns.
    delimiter: str = Field(default=",", min_length=1, description="Column delimiter")
    # Ignore the first non-blank row.
    skip_header: bool = Field(default=False, description="Skip a header row")
    # Log and drop malformed rows instead of failing.
    skip_invalid: bool = Field(default=False, description="Skip malformed rows")
    # Emit a progress log every N pairs; 0 disables.
    report_every: int = Field(default=0, ge=0, description="Progress log interval in pairs")


class MomentSettings(BaseSettings):
    """Configuration settings loaded from env or optional TOML."""

    # Environment keys use STREAMING_MOMENTS_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="STREAMING_MOMENTS_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    reader: ReaderConfig = Field(default_factory=ReaderConfig)

    @classmethod
    def from_toml(cls, path: str | Path) -> "MomentSettings":
        data = tomllib.loads(Path(path).read_text())
        return cls.model_validate(data)
