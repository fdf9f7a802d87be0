"""Normalizer: tokens -> absolute canonical commands (M, L, C, Q, Z).

Relative coordinates are resolved against a cursor; H/V become L, S/T become
C/Q with the reflected control point, and arcs become cubics. The cursor
exists only for the duration of one ``normalize()`` call.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pathnorm.svg.arc import arc_to_cubic_beziers
from pathnorm.svg.commands import CanonicalCommand, Token

logger = logging.getLogger(__name__)


@dataclass
class _Reflection:
    """Control point available to a following S (kind "C") or T (kind "Q")."""

    kind: str
    x: float
    y: float


@dataclass
class _Cursor:
    x: float = 0.0
    y: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0
    reflection: _Reflection | None = None
    subpath_open: bool = False

    def resolve(self, px: float, py: float, relative: bool) -> tuple[float, float]:
        if relative:
            return (self.x + px, self.y + py)
        return (px, py)

    def reflect(self, kind: str) -> tuple[float, float]:
        """First control point of a smooth segment: mirror of the last one, or the cursor."""
        r = self.reflection
        if r is None or r.kind != kind:
            return (self.x, self.y)
        return (2 * self.x - r.x, 2 * self.y - r.y)

    def move_to(self, x: float, y: float) -> None:
        self.x, self.y = x, y


_Handler = Callable[[_Cursor, tuple[float, ...], bool, list[CanonicalCommand]], None]


def _ensure_subpath(cur: _Cursor, out: list[CanonicalCommand]) -> None:
    # Drawing with no open subpath starts one at the cursor
    if not cur.subpath_open:
        out.append(CanonicalCommand("M", (cur.x, cur.y)))
        cur.start_x, cur.start_y = cur.x, cur.y
        cur.subpath_open = True


def _line(cur: _Cursor, x: float, y: float, out: list[CanonicalCommand]) -> None:
    _ensure_subpath(cur, out)
    out.append(CanonicalCommand("L", (x, y)))
    cur.move_to(x, y)
    cur.reflection = None


def _handle_move(cur, group, relative, out):
    x, y = cur.resolve(group[0], group[1], relative)
    out.append(CanonicalCommand("M", (x, y)))
    cur.move_to(x, y)
    cur.start_x, cur.start_y = x, y
    cur.subpath_open = True
    cur.reflection = None


def _handle_line(cur, group, relative, out):
    _line(cur, *cur.resolve(group[0], group[1], relative), out)


def _handle_horizontal(cur, group, relative, out):
    x = cur.x + group[0] if relative else group[0]
    _line(cur, x, cur.y, out)


def _handle_vertical(cur, group, relative, out):
    y = cur.y + group[0] if relative else group[0]
    _line(cur, cur.x, y, out)


def _cubic(cur, c1, c2, end, out):
    _ensure_subpath(cur, out)
    out.append(CanonicalCommand("C", (*c1, *c2, *end)))
    cur.move_to(*end)
    cur.reflection = _Reflection("C", *c2)


def _quadratic(cur, ctrl, end, out):
    _ensure_subpath(cur, out)
    out.append(CanonicalCommand("Q", (*ctrl, *end)))
    cur.move_to(*end)
    cur.reflection = _Reflection("Q", *ctrl)


def _handle_cubic(cur, group, relative, out):
    c1 = cur.resolve(group[0], group[1], relative)
    c2 = cur.resolve(group[2], group[3], relative)
    end = cur.resolve(group[4], group[5], relative)
    _cubic(cur, c1, c2, end, out)


def _handle_smooth_cubic(cur, group, relative, out):
    c1 = cur.reflect("C")
    c2 = cur.resolve(group[0], group[1], relative)
    end = cur.resolve(group[2], group[3], relative)
    _cubic(cur, c1, c2, end, out)


def _handle_quadratic(cur, group, relative, out):
    ctrl = cur.resolve(group[0], group[1], relative)
    end = cur.resolve(group[2], group[3], relative)
    _quadratic(cur, ctrl, end, out)


def _handle_smooth_quadratic(cur, group, relative, out):
    ctrl = cur.reflect("Q")
    end = cur.resolve(group[0], group[1], relative)
    _quadratic(cur, ctrl, end, out)


def _handle_arc(cur, group, relative, out):
    rx, ry, rotation, large_arc, sweep = group[:5]
    x, y = cur.resolve(group[5], group[6], relative)
    curves = arc_to_cubic_beziers(cur.x, cur.y, rx, ry, rotation, large_arc, sweep, x, y)
    if curves:
        _ensure_subpath(cur, out)
        out.extend(curves)
    cur.move_to(x, y)
    cur.reflection = None


def _handle_close(cur, group, relative, out):
    if not cur.subpath_open:
        return
    out.append(CanonicalCommand("Z"))
    cur.move_to(cur.start_x, cur.start_y)
    cur.subpath_open = False
    cur.reflection = None


_HANDLERS: dict[str, _Handler] = {
    "M": _handle_move,
    "L": _handle_line,
    "H": _handle_horizontal,
    "V": _handle_vertical,
    "C": _handle_cubic,
    "S": _handle_smooth_cubic,
    "Q": _handle_quadratic,
    "T": _handle_smooth_quadratic,
    "A": _handle_arc,
    "Z": _handle_close,
}


def normalize(tokens: Iterable[Token]) -> list[CanonicalCommand]:
    """Rewrite tokens as absolute M/L/C/Q/Z commands.

    Repeated parameter groups expand to one command each; extra pairs after
    a moveto are linetos. Incomplete trailing groups, groups holding a
    non-finite number and a Z with no open subpath are ignored.
    """
    out: list[CanonicalCommand] = []
    cur = _Cursor()

    for token in tokens:
        handler = _HANDLERS.get(token.absolute_kind)
        if handler is None:
            continue
        arity = token.arity
        if arity and len(token.params) % arity:
            logger.debug(
                "Ignoring %d trailing parameter(s) of %r",
                len(token.params) % arity,
                token.kind,
            )

        # Pairs after the first moveto pair are implicit linetos
        first = True
        for group in token.groups():
            if not all(math.isfinite(v) for v in group):
                logger.debug("Skipping non-finite group %r of %r", group, token.kind)
                continue
            if token.absolute_kind == "M" and not first:
                _handle_line(cur, group, token.is_relative, out)
            else:
                handler(cur, group, token.is_relative, out)
            first = False

    return out


def is_unusable(path_data: str, commands: list[CanonicalCommand]) -> bool:
    """True when non-blank input normalized to nothing (a data-quality problem)."""
    return bool(path_data and path_data.strip()) and not commands
