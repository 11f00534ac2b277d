"""Process configuration read from the environment."""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_cors_origins() -> List[str]:
    return [
        "http://rene-descartes.store",
        "http://localhost:5500",
        "http://127.0.0.1:5500",
    ]


class Settings(BaseSettings):
    """Plaza server settings.

    ``PORT``, ``HOST``, ``LOG_LEVEL`` and ``CORS_ORIGINS`` (a JSON list) are
    read from the environment without a prefix.
    """

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=_default_cors_origins)


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
