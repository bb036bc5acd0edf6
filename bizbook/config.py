# bizbook/config.py

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings, read from BIZBOOK_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="BIZBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(default="WARNING", description="Root log level.")
    log_file: Optional[Path] = Field(default=None, description="Log to this file instead of stderr.")
    prompt: str = Field(default="bizbook> ", description="Prompt shown by the interactive shell.")


@lru_cache
def get_settings() -> Settings:
    return Settings()
