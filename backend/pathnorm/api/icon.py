"""POST /api/icon: place an icon SVG into a square of a given size."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pathnorm.config import Settings
from pathnorm.dependencies import check_input_length, get_settings
from pathnorm.models.requests import IconRequest
from pathnorm.models.responses import IconResponse
from pathnorm.svg.icons import place_icon

router = APIRouter()


@router.post("/icon", response_model=IconResponse)
async def icon(
    req: IconRequest,
    settings: Settings = Depends(get_settings),
) -> IconResponse:
    check_input_length(req.svg, settings)
    try:
        placement = place_icon(req.svg, req.size, settings.output_precision)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return IconResponse(
        size=placement.size,
        scale=placement.scale,
        stroke_width=placement.stroke_width,
        paths=placement.paths,
        warnings=placement.warnings,
    )
