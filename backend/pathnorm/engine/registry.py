"""Stage registry: every pipeline stage is a standalone function registered via decorator.

Usage:
    @stage(id="S1.01", layer=Layer.NORMALIZATION, dependencies=["S0.01"])
    def normalize_tokens(ctx: PathContext) -> None:
        ctx.commands = normalize(ctx.tokens)

Stage modules register in import order, so a dependency may be registered
after the stage naming it. Dependencies are checked when an order is
resolved.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pathnorm.engine.context import PathContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    PARSING = 0
    NORMALIZATION = 1
    OUTPUT = 2


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["PathContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    """Pipeline stages keyed by stage ID."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        if spec.id in spec.dependencies:
            raise ValueError(f"Stage {spec.id} depends on itself")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def get_layer(self, layer: Layer) -> list[StageSpec]:
        return [s for s in self.all() if s.layer == layer]

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[StageSpec]:
        """Stages in dependency order.

        ``requested_ids`` limits the run to those stages plus everything they
        depend on. Unregistered dependencies and cycles raise ``ValueError``.
        """
        self._check_dependencies()
        if requested_ids is None:
            selected = set(self._stages)
        else:
            selected = self._with_dependencies(requested_ids)

        pending = {sid: set(self._stages[sid].dependencies) for sid in selected}
        ordered: list[StageSpec] = []
        while pending:
            ready = [self._stages[sid] for sid, deps in pending.items() if not deps]
            if not ready:
                raise ValueError(f"Circular dependency detected among: {sorted(pending)}")
            ready.sort(key=lambda s: (s.layer, s.id))
            ordered.extend(ready)
            for spec in ready:
                del pending[spec.id]
            for deps in pending.values():
                deps.difference_update(s.id for s in ready)
        return ordered

    def _check_dependencies(self) -> None:
        for spec in self._stages.values():
            missing = [dep for dep in spec.dependencies if dep not in self._stages]
            if missing:
                raise ValueError(f"Stage {spec.id} depends on unregistered stage(s): {', '.join(missing)}")

    def _with_dependencies(self, stage_ids: set[str]) -> set[str]:
        selected: set[str] = set()
        stack = list(stage_ids)
        while stack:
            sid = stack.pop()
            if sid in selected:
                continue
            if sid not in self._stages:
                raise ValueError(f"Unknown stage ID: {sid}")
            selected.add(sid)
            stack.extend(self._stages[sid].dependencies)
        return selected

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["PathContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
