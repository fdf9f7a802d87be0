"""Pipeline configuration: controls output shape."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Knobs for the output stages."""

    # Rewrite Q as the equivalent C so output is strictly M/L/C/Z
    elevate_quadratics: bool = True

    # Record a warning when non-blank input yields no commands
    warn_on_unusable: bool = True
