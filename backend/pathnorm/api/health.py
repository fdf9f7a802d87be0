"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from pathnorm.config import VERSION
from pathnorm.engine.registry import get_registry
from pathnorm.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=VERSION,
        stages_registered=get_registry().count,
    )
