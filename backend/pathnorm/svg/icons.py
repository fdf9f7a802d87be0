"""Fit an icon SVG into a square of a given size.

Icon sets draw on a small fixed canvas (24x24 for Lucide-style sets); the
placement scale maps that canvas onto the target size and every shape is
normalized and scaled on the way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pathnorm.svg.extract import DEFAULT_CANVAS, extract_path_data, viewbox_size
from pathnorm.svg.formatter import DEFAULT_PRECISION, elevate_quadratics, format_commands, scale_commands
from pathnorm.svg.normalizer import is_unusable, normalize
from pathnorm.svg.tokenizer import tokenize

logger = logging.getLogger(__name__)

# Stroke never thinner than this, in output units
_MIN_STROKE_WIDTH = 1.5
_STROKE_RATIO = 0.08


@dataclass
class IconPlacement:
    size: float
    scale: float
    stroke_width: float
    paths: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def icon_scale(size: float, viewbox_width: float = DEFAULT_CANVAS[0]) -> float:
    """Scale factor from the icon's canvas width to ``size``."""
    if viewbox_width <= 0:
        raise ValueError(f"viewBox width must be positive, got {viewbox_width!r}")
    return size / viewbox_width


def icon_stroke_width(size: float) -> float:
    return max(_MIN_STROKE_WIDTH, size * _STROKE_RATIO)


def place_icon(svg_text: str, size: float, precision: int = DEFAULT_PRECISION) -> IconPlacement:
    """Normalize and scale every shape of ``svg_text`` to fit a ``size`` square."""
    canvas_w, _ = viewbox_size(svg_text)
    scale = icon_scale(size, canvas_w)
    placement = IconPlacement(size=size, scale=scale, stroke_width=icon_stroke_width(size))

    for i, d in enumerate(extract_path_data(svg_text)):
        commands = normalize(tokenize(d))
        if is_unusable(d, commands):
            msg = f"shape {i}: path data produced no drawable commands"
            logger.warning("Icon %s (%r)", msg, d[:60])
            placement.warnings.append(msg)
            continue
        scaled = scale_commands(elevate_quadratics(commands), scale)
        placement.paths.append(format_commands(scaled, precision))

    if not placement.paths:
        placement.warnings.append("icon contains no drawable shapes")
    return placement
