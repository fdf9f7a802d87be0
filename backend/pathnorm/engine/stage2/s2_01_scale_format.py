"""S2.01: Scale and format.

Apply the uniform scale and serialize with fixed precision.
"""

from __future__ import annotations

from pathnorm.engine.context import PathContext
from pathnorm.engine.registry import Layer, stage
from pathnorm.svg.formatter import elevate_quadratics, format_commands, scale_commands


@stage(
    id="S2.01",
    layer=Layer.OUTPUT,
    dependencies=["S1.01"],
    description="Scale commands and serialize to path data",
)
def scale_and_format(ctx: PathContext) -> None:
    commands = ctx.commands
    if ctx.config.elevate_quadratics:
        commands = elevate_quadratics(commands)
    ctx.output_commands = scale_commands(commands, ctx.scale)
    ctx.output = format_commands(ctx.output_commands, ctx.precision)
