"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathnorm.config import VERSION, settings
from pathnorm.engine.pipeline import register_stages

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pathnorm_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="PathNorm",
        description="SVG path normalization: any path data to absolute M/L/C/Z",
        version=VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules to trigger registration
    register_stages()

    from pathnorm.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
