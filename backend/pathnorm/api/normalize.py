"""POST /api/tokenize, /api/normalize: path data in, canonical path data out."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from pathnorm.config import Settings
from pathnorm.dependencies import check_input_length, get_settings
from pathnorm.engine.config import PipelineConfig
from pathnorm.engine.context import PathContext
from pathnorm.engine.pipeline import create_pipeline
from pathnorm.models.path import CommandModel, TokenModel
from pathnorm.models.requests import NormalizeRequest, TokenizeRequest
from pathnorm.models.responses import NormalizeResponse, TokenizeResponse
from pathnorm.svg.tokenizer import tokenize
from pathnorm.utils.geometry import bbox, sample_commands

router = APIRouter()


@router.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_path(
    req: TokenizeRequest,
    settings: Settings = Depends(get_settings),
) -> TokenizeResponse:
    check_input_length(req.path_data, settings)
    return TokenizeResponse(tokens=[TokenModel.from_token(t) for t in tokenize(req.path_data)])


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_path(
    req: NormalizeRequest,
    settings: Settings = Depends(get_settings),
) -> NormalizeResponse:
    check_input_length(req.path_data, settings)
    start = time.perf_counter()

    ctx = PathContext(
        path_data=req.path_data,
        scale=req.scale,
        precision=settings.output_precision if req.precision is None else req.precision,
    )
    pipeline = create_pipeline(PipelineConfig(elevate_quadratics=not req.keep_quadratics))
    ctx = pipeline.run(ctx)

    elapsed = (time.perf_counter() - start) * 1000

    return NormalizeResponse(
        path_data=ctx.output,
        commands=[CommandModel.from_command(c) for c in ctx.output_commands],
        bbox=bbox(sample_commands(ctx.output_commands)),
        subpath_count=ctx.num_subpaths,
        warnings=ctx.warnings,
        errors=ctx.errors,
        processing_time_ms=round(elapsed, 3),
    )
