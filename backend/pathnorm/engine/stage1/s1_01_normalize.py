"""S1.01: Normalize.

Resolve relative coordinates and shorthand commands, convert arcs to cubics.
"""

from __future__ import annotations

from pathnorm.engine.context import PathContext
from pathnorm.engine.registry import Layer, stage
from pathnorm.svg.normalizer import normalize


@stage(
    id="S1.01",
    layer=Layer.NORMALIZATION,
    dependencies=["S0.01"],
    description="Rewrite tokens as absolute M/L/C/Q/Z commands",
)
def normalize_tokens(ctx: PathContext) -> None:
    ctx.commands = normalize(ctx.tokens)
