"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import HTTPException

from pathnorm.config import Settings, settings


def get_settings() -> Settings:
    return settings


def check_input_length(text: str, settings: Settings) -> None:
    """Reject request bodies longer than ``max_path_length`` with 413."""
    if len(text) > settings.max_path_length:
        raise HTTPException(
            status_code=413,
            detail=f"Input is {len(text)} characters; limit is {settings.max_path_length}",
        )
