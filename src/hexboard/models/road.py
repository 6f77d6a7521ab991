"""Road model — a board edge between two adjacent tiles."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexboard.models.hex import EdgeDirection
from hexboard.models.tile import GameTile
from hexboard.util.errors import InvariantViolation
from hexboard.util.hex_math import canonical_hash, vector_to_direction

# Rotation of the road bar so it lies along the shared hex side
ROAD_ANGLES: dict[EdgeDirection, float] = {
    EdgeDirection.NORTH_EAST: math.pi / 6,
    EdgeDirection.EAST: math.pi / 2,
    EdgeDirection.SOUTH_EAST: 5 * math.pi / 6,
    EdgeDirection.SOUTH_WEST: 7 * math.pi / 6,
    EdgeDirection.WEST: 3 * math.pi / 2,
    EdgeDirection.NORTH_WEST: 11 * math.pi / 6,
}


@dataclass(frozen=True, eq=False)
class Road:
    """An unordered pair of neighboring tiles.

    Attributes:
        tiles: The two tiles the road separates.

    Raises:
        InvariantViolation: If the tiles are not exactly two lattice neighbors.
    """

    tiles: tuple[GameTile, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        if len(self.tiles) != 2:
            raise InvariantViolation(f"A road needs exactly 2 tiles, got {len(self.tiles)}")
        first, second = self.tiles
        if not first.is_neighbor(second):
            raise InvariantViolation(
                f"Road tiles {first.coord!r} and {second.coord!r} are not neighbors"
            )

    @property
    def key(self) -> str:
        """Canonical hash, identical for both tile orders."""
        return canonical_hash(t.coord for t in self.tiles)

    @property
    def direction(self) -> EdgeDirection:
        """Edge direction leading from the first tile to the second."""
        return vector_to_direction(self.tiles[0].coord, self.tiles[1].coord)

    @property
    def angle(self) -> float:
        return ROAD_ANGLES[self.direction]

    def pixel_position(self) -> tuple[float, float]:
        """Midpoint of the two tile centres."""
        (x1, y1), (x2, y2) = (t.pixel_position() for t in self.tiles)
        return (x1 + x2) / 2, (y1 + y2) / 2

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Road({self.key})"
