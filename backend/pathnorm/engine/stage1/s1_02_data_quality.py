"""S1.02: Data quality check.

Blank input that produces nothing is fine ("nothing to draw"). Non-blank
input that produces nothing means the upstream path data was unusable; that
is recorded as a warning, never raised.
"""

from __future__ import annotations

import logging

from pathnorm.engine.context import PathContext
from pathnorm.engine.registry import Layer, stage
from pathnorm.svg.normalizer import is_unusable

logger = logging.getLogger(__name__)


@stage(
    id="S1.02",
    layer=Layer.NORMALIZATION,
    dependencies=["S1.01"],
    description="Flag non-blank path data that normalized to nothing",
)
def data_quality(ctx: PathContext) -> None:
    if is_unusable(ctx.path_data, ctx.commands):
        logger.warning("Path data produced no drawable commands: %r", ctx.path_data[:80])
        ctx.warnings.append("path data produced no drawable commands")

    dropped = sum(len(t.params) % t.arity for t in ctx.tokens if t.arity)
    if dropped:
        ctx.warnings.append(f"{dropped} parameter(s) ignored in incomplete command groups")
