"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TokenizeRequest(BaseModel):
    path_data: str = Field(..., description="Raw SVG path data (the d attribute)")


class NormalizeRequest(BaseModel):
    path_data: str = Field(..., description="Raw SVG path data (the d attribute)")
    scale: float = Field(default=1.0, gt=0, description="Uniform scale applied to every coordinate")
    precision: int | None = Field(
        default=None,
        ge=0,
        le=10,
        description="Decimal places in the output (server default when omitted)",
    )
    keep_quadratics: bool = Field(
        default=False,
        description="Leave Q commands in the output instead of rewriting them as C",
    )


class IconRequest(BaseModel):
    svg: str = Field(..., description="Raw icon SVG code")
    size: float = Field(default=24.0, gt=0, description="Target width/height of the placed icon")
