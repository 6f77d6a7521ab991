"""Hex math utilities: geometry functions for pointy-top hexagonal grids.

All functions operate on CubeCoord (cube coordinates).
Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from hexboard.models.hex import EDGE_VECTORS, CubeCoord, EdgeDirection

SQRT3 = math.sqrt(3)

HASH_SEPARATOR = "|"
"""Joins per-coordinate strings inside a canonical hash."""


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def cube_round(fq: float, fr: float, fs: float) -> CubeCoord:
    """Round fractional cube coordinates to the nearest hex.

    Each component is rounded on its own; the one with the largest rounding
    residual is then recomputed from the other two so that q + r + s == 0.
    On equal residuals q wins over r and r wins over s. Exact halves round
    up, so a point on a shared side always resolves to the same neighbor.
    """
    q = _round_half_up(fq)
    r = _round_half_up(fr)
    s = _round_half_up(fs)

    q_diff = abs(q - fq)
    r_diff = abs(r - fr)
    s_diff = abs(s - fs)

    if q_diff > r_diff and q_diff > s_diff:
        q = -r - s
    elif r_diff > s_diff:
        r = -q - s
    else:
        s = -q - r

    return CubeCoord(q, r, s)


def pixel_to_cube(x: float, y: float, size: float) -> Optional[CubeCoord]:
    """Map a board-local pixel position to the hex containing it.

    Inverse of the pointy-top projection followed by cube rounding.
    Returns None for a non-positive tile size.
    """
    if size <= 0:
        return None
    fq = (SQRT3 / 3 * x - y / 3) / size
    fr = (2 / 3 * y) / size
    return cube_round(fq, fr, -fq - fr)


def cube_to_pixel(coord: CubeCoord, size: float) -> tuple[float, float]:
    """Pointy-top projection of a hex centre to pixels."""
    x = size * (SQRT3 * coord.q + SQRT3 / 2 * coord.r)
    y = size * (3 / 2 * coord.r)
    return x, y


def hex_corners(cx: float, cy: float, size: float) -> list[tuple[float, float]]:
    """Corners of a pointy-top hexagon at 30° + 60°·i, clockwise from south-east."""
    corners = []
    for i in range(6):
        angle = math.pi / 3 * i + math.pi / 6
        corners.append((cx + size * math.cos(angle), cy + size * math.sin(angle)))
    return corners


def coordinates_are_equal(a: CubeCoord, b: CubeCoord) -> bool:
    """Exact integer equality on all three components."""
    return a.q == b.q and a.r == b.r and a.s == b.s


def vector_to_direction(start: CubeCoord, end: CubeCoord) -> Optional[EdgeDirection]:
    """Return the edge direction leading from `start` to `end`.

    Returns None when `end` is not a lattice neighbor of `start`.
    """
    delta = end - start
    for direction, vector in EDGE_VECTORS.items():
        if coordinates_are_equal(delta, vector):
            return direction
    return None


def coordinate_hash(coord: CubeCoord) -> str:
    """Per-coordinate hash ``"q,r,s"``."""
    return coord.key


def canonical_hash(coords: Iterable[CubeCoord]) -> str:
    """Order-independent key for a group of coordinates.

    The per-coordinate strings are sorted before joining, so the same road or
    settlement hashes identically whichever tile discovers it.
    """
    return HASH_SEPARATOR.join(sorted(coordinate_hash(c) for c in coords))


def board_coordinates(radius: int) -> list[CubeCoord]:
    """Enumerate every cell of a hexagonal board of the given radius.

    Row-major order: r outer, q inner, keeping cells with |s| <= radius.
    """
    coords: list[CubeCoord] = []
    for r in range(-radius, radius + 1):
        for q in range(-radius, radius + 1):
            s = -q - r
            if abs(s) <= radius:
                coords.append(CubeCoord(q, r, s))
    return coords


def is_outer_ring(coord: CubeCoord, radius: int) -> bool:
    """True for cells on the outermost ring of a board of `radius`."""
    return abs(coord.q) == radius or abs(coord.r) == radius or abs(coord.s) == radius


def board_cell_count(radius: int) -> int:
    """Number of cells on a board of `radius`: 3R² + 3R + 1."""
    return 3 * radius * radius + 3 * radius + 1
