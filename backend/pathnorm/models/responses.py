"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathnorm.models.path import CommandModel, TokenModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class TokenizeResponse(BaseModel):
    tokens: list[TokenModel] = Field(default_factory=list)


class NormalizeResponse(BaseModel):
    path_data: str = ""
    commands: list[CommandModel] = Field(default_factory=list)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    subpath_count: int = 0
    warnings: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class IconResponse(BaseModel):
    size: float
    scale: float
    stroke_width: float
    paths: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
