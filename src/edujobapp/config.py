from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def repo_root() -> Path:
    """
    Description: Resolve repository root from within src/ package.
    Layer: L0
    Input: None
    Output: Absolute Path to repo root
    """
    # src/edujobapp/config.py -> src/edujobapp -> src -> repo root
    return Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """
    Description: Central configuration for the analytics engine.
    Layer: L0
    Input: .env in repo root + EDUJOBAPP_* environment variables
    Output: Strongly typed settings object
    """

    model_config = SettingsConfigDict(
        env_prefix="EDUJOBAPP_",
        env_file=str(repo_root() / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Triage
    draft_warning_days: int = Field(default=7, ge=0)

    # Country pyramid
    pyramid_gap_ratio: float = Field(default=0.25, ge=0.0)
    unknown_country_label: str = "Unknown"
    country_code_length: int = Field(default=2, ge=1)

    # Runtime
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Description: Cached settings accessor for the module-level engine functions.
    Layer: L0
    Input: None
    Output: Settings
    """
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Description: Apply the standard log format for host applications and scripts.
    Layer: L0
    Input: Optional Settings (defaults to get_settings())
    Output: Root logger configured via logging.basicConfig
    """
    s = settings or get_settings()
    logging.basicConfig(level=s.log_level.upper(), format=LOG_FORMAT)
