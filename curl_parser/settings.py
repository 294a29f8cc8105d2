"""Runtime configuration.

Values come from ``CURL_PARSER_*`` environment variables or a local ``.env``
file, validated by pydantic-settings.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CURL_PARSER_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    host: str = Field(
        default="0.0.0.0",
        min_length=1,
        description="Bind address for the web app.",
    )
    port: int = Field(
        default=7700,
        ge=1,
        le=65535,
        description="Bind port for the web app.",
    )
    debug: bool = Field(
        default=False,
        description="Run Flask in debug mode.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Root logging level for the CLI and the web app.",
    )
    pretty_json: bool = Field(
        default=False,
        description="Pretty-print JSON output from the CLI by default.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
