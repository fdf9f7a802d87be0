"""Scale canonical commands and serialize them back to path data."""

from __future__ import annotations

import math
from collections.abc import Iterable

from pathnorm.svg.commands import CanonicalCommand
from pathnorm.svg.normalizer import normalize
from pathnorm.svg.tokenizer import tokenize

DEFAULT_PRECISION = 2


def _check_scale(scale: float) -> None:
    if not math.isfinite(scale) or scale <= 0:
        raise ValueError(f"Scale must be a positive finite number, got {scale!r}")


def scale_commands(commands: Iterable[CanonicalCommand], scale: float) -> list[CanonicalCommand]:
    """Multiply every coordinate by ``scale``."""
    _check_scale(scale)
    return [CanonicalCommand(cmd.kind, tuple(v * scale for v in cmd.params)) for cmd in commands]


def elevate_quadratics(commands: Iterable[CanonicalCommand]) -> list[CanonicalCommand]:
    """Replace every Q with the identical curve expressed as a C.

    C1 = P0 + 2/3 (Q1 - P0), C2 = P2 + 2/3 (Q1 - P2).
    """
    result: list[CanonicalCommand] = []
    x = y = 0.0
    start_x = start_y = 0.0

    for cmd in commands:
        if cmd.kind == "Q":
            qx, qy, ex, ey = cmd.params
            c1 = (x + 2 / 3 * (qx - x), y + 2 / 3 * (qy - y))
            c2 = (ex + 2 / 3 * (qx - ex), ey + 2 / 3 * (qy - ey))
            result.append(CanonicalCommand("C", (*c1, *c2, ex, ey)))
        else:
            result.append(cmd)

        if cmd.kind == "Z":
            x, y = start_x, start_y
        elif cmd.end_point is not None:
            x, y = cmd.end_point
            if cmd.kind == "M":
                start_x, start_y = x, y

    return result


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Fixed-point text, never scientific notation."""
    return f"{value:.{precision}f}"


def format_commands(commands: Iterable[CanonicalCommand], precision: int = DEFAULT_PRECISION) -> str:
    """Serialize as ``"M 1.00 2.00 L ..."``: uppercase letters, single spaces."""
    parts: list[str] = []
    for cmd in commands:
        parts.append(cmd.kind.upper())
        parts.extend(format_number(v, precision) for v in cmd.params)
    return " ".join(parts)


def scale_path_data(path_data: str, scale: float, precision: int = DEFAULT_PRECISION) -> str:
    """Normalize ``path_data`` to absolute M/L/C/Z, scale it and serialize it."""
    _check_scale(scale)
    commands = elevate_quadratics(normalize(tokenize(path_data)))
    return format_commands(scale_commands(commands, scale), precision)


normalize_and_scale = scale_path_data
