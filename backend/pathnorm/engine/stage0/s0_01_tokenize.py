"""S0.01: Tokenize.

Split raw path data into (command letter, numbers) tokens.
"""

from __future__ import annotations

from pathnorm.engine.context import PathContext
from pathnorm.engine.registry import Layer, stage
from pathnorm.svg.tokenizer import tokenize


@stage(
    id="S0.01",
    layer=Layer.PARSING,
    description="Tokenize path data into command tokens",
)
def tokenize_path(ctx: PathContext) -> None:
    ctx.tokens = tokenize(ctx.path_data)
