"""Application configuration."""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and DFM_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="DFM_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    output_path: str = "dot.dot"
    graph_name: str = "G"
    layout: str = "twopi"
    overlap: str = "prism"
    overlap_scaling: float = 4.5
    log_level: str = "WARNING"


settings = Settings()
