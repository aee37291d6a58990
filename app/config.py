"""Process settings, read once from the environment."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.services.indexer import DEFAULT_LANGUAGE as BUILTIN_DEFAULT_LANGUAGE

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    # Language assigned to pages without a ``Language:`` header.  An empty
    # value falls back to the built-in "en".
    DEFAULT_LANGUAGE: str = BUILTIN_DEFAULT_LANGUAGE
    LOG_LEVEL: LogLevel = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()


def resolve_default_language(settings: Settings) -> str:
    """The configured default language, or the built-in one when unset."""
    return settings.DEFAULT_LANGUAGE.strip() or BUILTIN_DEFAULT_LANGUAGE
