"""
Configuration settings for popquiz.

Uses Pydantic Settings for environment variable management with .env file support.
Every setting can be overridden with a POPQUIZ_-prefixed environment variable,
e.g. POPQUIZ_DATA_DIR=/tmp/quizzes.
"""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POPQUIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    data_dir: Path = Field(
        default=Path.home() / ".popquiz",
        description="Directory holding quiz files",
    )
    results_subdir: str = Field(
        default="results",
        description="Results directory, relative to data_dir",
    )
    quiz_suffix: str = Field(
        default=".json",
        description="File extension of quiz files",
    )

    # ========================================
    # Session
    # ========================================
    max_choices: int = Field(
        default=3,
        ge=1,
        le=25,
        description="Wrong candidates shown for a multiple choice question",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for question order and choice shuffling (None = unseeded)",
    )

    # ========================================
    # Tooling
    # ========================================
    editor: str = Field(
        default_factory=lambda: os.environ.get("EDITOR", "vim"),
        description="Command used by `popquiz edit`",
    )
    log_level: str = Field(
        default="WARNING",
        description="Minimum level written to stderr by the CLI",
    )

    @property
    def results_dir(self) -> Path:
        return self.data_dir / self.results_subdir


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
