# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = (
    "CollectionSettings",
    "settings",
)


class CollectionSettings(BaseSettings, frozen=True):
    """Package settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="BLOCKDATA_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        "INFO", description="Level applied to the package logger"
    )
    REPR_MAX_ITEMS: int = Field(
        10, ge=0, description="Items shown by repr() before eliding"
    )
    ERROR_VALUE_MAX_LEN: int = Field(
        50, ge=8, description="Truncation length for values in error details"
    )

    @field_validator("LOG_LEVEL", mode="before")
    def _validate_log_level(cls, value):
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


settings = CollectionSettings()
