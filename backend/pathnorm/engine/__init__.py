"""PathNorm stage engine."""

from pathnorm.engine.context import PathContext
from pathnorm.engine.pipeline import Pipeline, create_pipeline, register_stages
from pathnorm.engine.registry import Layer, get_registry, stage

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "PathContext",
    "Pipeline",
    "create_pipeline",
    "register_stages",
]
