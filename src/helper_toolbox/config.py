"""Configuration for the toolbox command line.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

The library functions never read settings on their own; the CLI resolves them
once and passes the values down explicitly.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolboxSettings(BaseSettings):
    """Settings for the toolbox CLI.

    Environment variables:
    - TOOLBOX_LOG_LEVEL          (optional)
    - TOOLBOX_HASH_ALGORITHM     (optional)
    - TOOLBOX_DEFAULT_MIME_TYPE  (optional)
    - TOOLBOX_ENTITY_FORMAT      (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `ToolboxSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="TOOLBOX_LOG_LEVEL",
        description="Root logging level",
    )

    hash_algorithm: str = Field(
        default="sha256",
        validation_alias="TOOLBOX_HASH_ALGORITHM",
        description="Digest algorithm used by `hash` when none is given",
    )

    default_mime_type: str = Field(
        default="application/octet-stream",
        validation_alias="TOOLBOX_DEFAULT_MIME_TYPE",
        description="MIME type reported for unknown file names",
    )

    entity_format: str = Field(
        default="html",
        validation_alias="TOOLBOX_ENTITY_FORMAT",
        description="Entity table used by `encode`/`decode` (html, html4, html5, xml)",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("hash_algorithm", "entity_format")
    @classmethod
    def _lowercase(cls, value: str) -> str:
        return value.strip().lower()
