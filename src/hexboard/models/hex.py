"""Hexagonal coordinate system using cube coordinates (q, r, s).

Cube coordinates define position on a pointy-top hex grid where:
- q axis runs roughly east
- r axis runs roughly south-east
- s = -q - r, so every valid coordinate satisfies q + r + s == 0

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CubeCoord:
    """Immutable cube hex coordinate.

    Attributes:
        q: Column coordinate (east axis).
        r: Row coordinate (south-east axis).
        s: Third cube coordinate, always -q - r.
    """

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise ValueError(
                f"Invalid cube coordinate ({self.q},{self.r},{self.s}): q + r + s must be 0"
            )

    @classmethod
    def from_axial(cls, q: int, r: int) -> CubeCoord:
        """Build a cube coordinate from axial (q, r)."""
        return cls(q, r, -q - r)

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: CubeCoord) -> CubeCoord:
        return CubeCoord(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: CubeCoord) -> CubeCoord:
        return CubeCoord(self.q - other.q, self.r - other.r, self.s - other.s)

    # -- Geometry --------------------------------------------------------

    def distance_to(self, other: CubeCoord) -> int:
        """Hex grid distance (number of steps along hex edges)."""
        return max(abs(self.q - other.q), abs(self.r - other.r), abs(self.s - other.s))

    def neighbor(self, direction: EdgeDirection) -> CubeCoord:
        """Return the adjacent coordinate across the given edge."""
        return self + EDGE_VECTORS[direction]

    def neighbors(self) -> list[CubeCoord]:
        """Return the 6 adjacent hex coordinates, in EdgeDirection order."""
        return [self + EDGE_VECTORS[d] for d in EdgeDirection]

    def ring(self, radius: int) -> list[CubeCoord]:
        """Return all hexes at exactly `radius` steps away.

        Returns empty list for radius <= 0.
        """
        if radius <= 0:
            return []
        results: list[CubeCoord] = []
        # Start at the south-west corner of the ring and walk around it
        h = self + CubeCoord(-radius, radius, 0)
        for direction in _RING_WALK:
            for _ in range(radius):
                results.append(h)
                h = h + EDGE_VECTORS[direction]
        return results

    def disk(self, radius: int) -> set[CubeCoord]:
        """Return all hexes within `radius` steps (inclusive)."""
        results: set[CubeCoord] = set()
        for dq in range(-radius, radius + 1):
            for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
                results.add(CubeCoord.from_axial(self.q + dq, self.r + dr))
        return results

    # -- Serialization ---------------------------------------------------

    @property
    def key(self) -> str:
        """Per-coordinate hash string ``"q,r,s"``."""
        return f"{self.q},{self.r},{self.s}"

    def __repr__(self) -> str:
        return f"Cube({self.q},{self.r},{self.s})"


class EdgeDirection(Enum):
    """The six sides of a pointy-top hexagon (and the neighbor behind each)."""

    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"

    @property
    def opposite(self) -> EdgeDirection:
        return _OPPOSITE[self]


class VertexDirection(Enum):
    """The six corners of a pointy-top hexagon."""

    NORTH = "north"
    NORTH_EAST = "north_east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    NORTH_WEST = "north_west"


# Unit cube vectors per edge direction (pointy-top layout, y grows downward)
EDGE_VECTORS: dict[EdgeDirection, CubeCoord] = {
    EdgeDirection.NORTH_EAST: CubeCoord(1, -1, 0),
    EdgeDirection.EAST: CubeCoord(1, 0, -1),
    EdgeDirection.SOUTH_EAST: CubeCoord(0, 1, -1),
    EdgeDirection.SOUTH_WEST: CubeCoord(-1, 1, 0),
    EdgeDirection.WEST: CubeCoord(-1, 0, 1),
    EdgeDirection.NORTH_WEST: CubeCoord(0, -1, 1),
}

# The two sides that meet at each corner
VERTEX_EDGES: dict[VertexDirection, tuple[EdgeDirection, EdgeDirection]] = {
    VertexDirection.NORTH: (EdgeDirection.NORTH_WEST, EdgeDirection.NORTH_EAST),
    VertexDirection.NORTH_EAST: (EdgeDirection.NORTH_EAST, EdgeDirection.EAST),
    VertexDirection.SOUTH_EAST: (EdgeDirection.EAST, EdgeDirection.SOUTH_EAST),
    VertexDirection.SOUTH: (EdgeDirection.SOUTH_EAST, EdgeDirection.SOUTH_WEST),
    VertexDirection.SOUTH_WEST: (EdgeDirection.SOUTH_WEST, EdgeDirection.WEST),
    VertexDirection.NORTH_WEST: (EdgeDirection.WEST, EdgeDirection.NORTH_WEST),
}

_RING_WALK: tuple[EdgeDirection, ...] = (
    EdgeDirection.EAST,
    EdgeDirection.NORTH_EAST,
    EdgeDirection.NORTH_WEST,
    EdgeDirection.WEST,
    EdgeDirection.SOUTH_WEST,
    EdgeDirection.SOUTH_EAST,
)

_OPPOSITE: dict[EdgeDirection, EdgeDirection] = {
    EdgeDirection.NORTH_EAST: EdgeDirection.SOUTH_WEST,
    EdgeDirection.EAST: EdgeDirection.WEST,
    EdgeDirection.SOUTH_EAST: EdgeDirection.NORTH_WEST,
    EdgeDirection.SOUTH_WEST: EdgeDirection.NORTH_EAST,
    EdgeDirection.WEST: EdgeDirection.EAST,
    EdgeDirection.NORTH_WEST: EdgeDirection.SOUTH_EAST,
}
