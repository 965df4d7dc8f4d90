"""Application settings management leveraging pydantic v2."""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if os.getenv("ENV", "development") in {"development", "dev", "local"}:
    # Containers do not ship a .env; load_dotenv is a no-op without one.
    load_dotenv(override=False)


class AppSettings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    app_name: str = Field(
        default="MindEase",
        validation_alias=AliasChoices("APP_NAME", "MINDEASE_APP_NAME"),
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "MINDEASE_ENVIRONMENT"),
    )
    # Number of newest mood records considered when deriving a pattern.
    pattern_window: int = Field(
        default=10,
        ge=0,
        validation_alias=AliasChoices("PATTERN_WINDOW", "MINDEASE_PATTERN_WINDOW"),
    )
    lexicon_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LEXICON_PATH", "MINDEASE_LEXICON_PATH"),
    )
    templates_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices("TEMPLATES_PATH", "MINDEASE_TEMPLATES_PATH"),
    )

    model_config = SettingsConfigDict(
        env_file=(".env", "mindease/.env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load environment variables and return a cached settings instance."""

    return AppSettings()


__all__ = ["AppSettings", "get_settings"]
