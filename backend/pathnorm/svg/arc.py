"""Elliptical arc -> cubic Bezier conversion.

Endpoint parameterisation to centre parameterisation (SVG 1.1 implementation
notes, F.6.5), then one cubic per <= 90 degree slice of the sweep. A cubic
cannot follow an arc much past a quarter turn, so a full ellipse costs four
segments.
"""

from __future__ import annotations

import math

from pathnorm.svg.commands import CanonicalCommand

_QUARTER_TURN = math.pi / 2

# Absorbs float noise so an exact half turn is 2 slices, not 3.
_SEGMENT_EPS = 1e-9


def vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from u to v in radians. Zero-length vectors give 0."""
    sign = -1.0 if ux * vy - uy * vx < 0 else 1.0
    length = math.hypot(ux, uy) * math.hypot(vx, vy)
    if length == 0:
        return 0.0
    cos_val = max(-1.0, min(1.0, (ux * vx + uy * vy) / length))
    return sign * math.acos(cos_val)


def arc_to_cubic_beziers(
    x1: float,
    y1: float,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: float,
    sweep: float,
    x2: float,
    y2: float,
) -> list[CanonicalCommand]:
    """Convert the arc from (x1, y1) to (x2, y2) into absolute commands.

    Coincident endpoints or a non-finite argument give no commands. A zero
    radius gives a single ``L`` to the endpoint. Any non-zero flag value
    counts as set.
    """
    if not all(math.isfinite(v) for v in (x1, y1, rx, ry, rotation, x2, y2)):
        return []
    if x1 == x2 and y1 == y2:
        return []

    rx = abs(rx)
    ry = abs(ry)
    if rx == 0 or ry == 0:
        return [CanonicalCommand("L", (x2, y2))]

    large = bool(large_arc)
    clockwise = bool(sweep)

    phi = math.radians(rotation)
    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)

    # Midpoint difference in the ellipse's unrotated frame
    dx = (x1 - x2) / 2
    dy = (y1 - y2) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    # Radii too small to span the endpoints: grow uniformly
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        root = math.sqrt(lam)
        rx *= root
        ry *= root

    rx_sq = rx * rx
    ry_sq = ry * ry
    x1p_sq = x1p * x1p
    y1p_sq = y1p * y1p

    radicand = (rx_sq * ry_sq - rx_sq * y1p_sq - ry_sq * x1p_sq) / (rx_sq * y1p_sq + ry_sq * x1p_sq)
    coef = math.sqrt(max(0.0, radicand))
    if large == clockwise:
        coef = -coef

    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2

    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry

    theta1 = vector_angle(1.0, 0.0, ux, uy)
    dtheta = vector_angle(ux, uy, vx, vy)

    if not clockwise and dtheta > 0:
        dtheta -= 2 * math.pi
    elif clockwise and dtheta < 0:
        dtheta += 2 * math.pi

    num_segments = max(1, math.ceil(abs(dtheta) / _QUARTER_TURN - _SEGMENT_EPS))
    delta = dtheta / num_segments
    t = 4 / 3 * math.tan(delta / 4)

    def to_device(ex: float, ey: float) -> tuple[float, float]:
        return (
            cx + cos_phi * rx * ex - sin_phi * ry * ey,
            cy + sin_phi * rx * ex + cos_phi * ry * ey,
        )

    curves: list[CanonicalCommand] = []
    angle = theta1
    for i in range(num_segments):
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        cos_b = math.cos(angle + delta)
        sin_b = math.sin(angle + delta)

        cp1 = to_device(cos_a - t * sin_a, sin_a + t * cos_a)
        cp2 = to_device(cos_b + t * sin_b, sin_b - t * cos_b)
        # Last slice lands exactly on the requested endpoint
        end = (x2, y2) if i == num_segments - 1 else to_device(cos_b, sin_b)

        curves.append(CanonicalCommand("C", (*cp1, *cp2, *end)))
        angle += delta

    return curves
