"""Leaf-node geometry helpers over canonical commands. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from pathnorm.svg.commands import CanonicalCommand


def command_points(commands: Sequence[CanonicalCommand]) -> NDArray[np.float64]:
    """Every anchor and control point as an Nx2 array."""
    coords = [v for cmd in commands for v in cmd.params]
    if not coords:
        return np.empty((0, 2))
    return np.asarray(coords, dtype=np.float64).reshape(-1, 2)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def cubic_point(
    p0: Sequence[float],
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    t: NDArray[np.float64] | float,
) -> NDArray[np.float64]:
    """Bernstein form of a cubic, vectorised over ``t`` (returns len(t)x2)."""
    t = np.atleast_1d(np.asarray(t, dtype=np.float64))[:, None]
    mt = 1.0 - t
    return (
        mt**3 * np.asarray(p0)
        + 3 * mt**2 * t * np.asarray(p1)
        + 3 * mt * t**2 * np.asarray(p2)
        + t**3 * np.asarray(p3)
    )


def quadratic_point(
    p0: Sequence[float],
    p1: Sequence[float],
    p2: Sequence[float],
    t: NDArray[np.float64] | float,
) -> NDArray[np.float64]:
    t = np.atleast_1d(np.asarray(t, dtype=np.float64))[:, None]
    mt = 1.0 - t
    return mt**2 * np.asarray(p0) + 2 * mt * t * np.asarray(p1) + t**2 * np.asarray(p2)


def sample_commands(
    commands: Sequence[CanonicalCommand],
    samples_per_segment: int = 12,
) -> NDArray[np.float64]:
    """Polyline through the drawn outline: curves sampled, Z back to the subpath start."""
    ts = np.linspace(0.0, 1.0, samples_per_segment + 1)[1:]
    chunks: list[NDArray[np.float64]] = []
    cur = np.zeros(2)
    start = np.zeros(2)

    for cmd in commands:
        p = cmd.params
        if cmd.kind == "M":
            cur = start = np.array(p, dtype=np.float64)
            chunks.append(cur[None, :])
        elif cmd.kind == "L":
            cur = np.array(p, dtype=np.float64)
            chunks.append(cur[None, :])
        elif cmd.kind == "C":
            chunks.append(cubic_point(cur, p[0:2], p[2:4], p[4:6], ts))
            cur = np.array(p[4:6], dtype=np.float64)
        elif cmd.kind == "Q":
            chunks.append(quadratic_point(cur, p[0:2], p[2:4], ts))
            cur = np.array(p[2:4], dtype=np.float64)
        elif cmd.kind == "Z":
            chunks.append(start[None, :])
            cur = start

    if not chunks:
        return np.empty((0, 2))
    return np.vstack(chunks)
