"""SVG path-data tokenizer, normalizer and formatter."""

from pathnorm.svg.arc import arc_to_cubic_beziers, vector_angle
from pathnorm.svg.commands import CanonicalCommand, Token
from pathnorm.svg.formatter import format_commands, normalize_and_scale, scale_commands, scale_path_data
from pathnorm.svg.normalizer import is_unusable, normalize
from pathnorm.svg.tokenizer import tokenize

__all__ = [
    "Token",
    "CanonicalCommand",
    "tokenize",
    "normalize",
    "is_unusable",
    "arc_to_cubic_beziers",
    "vector_angle",
    "scale_commands",
    "format_commands",
    "scale_path_data",
    "normalize_and_scale",
]
