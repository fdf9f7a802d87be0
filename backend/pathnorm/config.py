"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

VERSION = "0.1.0"


class Settings(BaseSettings):
    pathnorm_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Output formatting
    output_precision: int = 2

    # Request limits
    max_path_length: int = 200_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
