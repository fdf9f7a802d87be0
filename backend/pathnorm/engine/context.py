"""PathContext: the mutable state object one path carries through the stages.

Built fresh per request and discarded afterwards; the pure functions in
``pathnorm.svg`` never see it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pathnorm.engine.config import PipelineConfig
from pathnorm.svg.commands import CanonicalCommand, Token


@dataclass
class PathContext:
    """Shared state flowing through the pipeline for a single path."""

    # Raw path data as received
    path_data: str = ""
    # Uniform scale applied at output
    scale: float = 1.0
    # Decimal places in the serialized output
    precision: int = 2
    # Set by the pipeline before any stage runs
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # --- Stage results ---
    tokens: list[Token] = field(default_factory=list)
    commands: list[CanonicalCommand] = field(default_factory=list)
    output_commands: list[CanonicalCommand] = field(default_factory=list)
    output: str = ""

    # Data-quality warnings (not errors: the path was still processed)
    warnings: list[str] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_blank(self) -> bool:
        return not self.path_data.strip()

    @property
    def num_commands(self) -> int:
        return len(self.commands)

    @property
    def num_subpaths(self) -> int:
        return sum(1 for cmd in self.commands if cmd.kind == "M")
