"""Pipeline orchestrator: runs stages in dependency order with config gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from pathnorm.engine.config import PipelineConfig
from pathnorm.engine.context import PathContext
from pathnorm.engine.registry import Layer, StageRegistry, StageSpec, get_registry

logger = logging.getLogger(__name__)

_STAGE_PACKAGES = ["stage0", "stage1", "stage2"]

# Skipped when PipelineConfig.warn_on_unusable is off
_QUALITY_CHECK_ID = "S1.02"


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    for package_suffix in _STAGE_PACKAGES:
        package_name = f"pathnorm.engine.{package_suffix}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


class Pipeline:
    """Orchestrates the stage pipeline."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: PathContext) -> PathContext:
        """Run every registered stage on the given context."""
        start = time.perf_counter()
        ctx.config = self.config

        skip_ids = self._gate()
        requested = {s.id for s in self.registry.all()} - skip_ids
        ordered = self.registry.resolve_order(requested)

        for spec in ordered:
            self._run_stage(spec, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages in %.2fms (%d commands)",
            len(ctx.completed_stages),
            len(ordered),
            total,
            ctx.num_commands,
        )
        return ctx

    def run_layer(self, ctx: PathContext, layer: Layer) -> PathContext:
        """Run only stages in a specific layer."""
        ctx.config = self.config
        for spec in self.registry.get_layer(layer):
            self._run_stage(spec, ctx)
        return ctx

    def _run_stage(self, spec: StageSpec, ctx: PathContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
            ctx.completed_stages.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s %s completed in %.2fms", spec.id, spec.description, elapsed)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)

    def _gate(self) -> set[str]:
        skip: set[str] = set()
        if not self.config.warn_on_unusable:
            skip.add(_QUALITY_CHECK_ID)
        return skip


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)
