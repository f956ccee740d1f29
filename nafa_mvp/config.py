"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "nafa-mvp"
    debug: bool = False
    log_level: str = "INFO"

    # Annotations
    annotation_id_prefix: str = "ann-"
    # Off by default: noise/light/crowd are stored exactly as submitted
    strict_sensory_levels: bool = False

    model_config = {"env_prefix": "NAFA_"}


settings = Settings()
