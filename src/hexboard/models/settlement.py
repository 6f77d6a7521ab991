"""Settlement model — a board corner where three tiles meet."""

from __future__ import annotations

from dataclasses import dataclass

from hexboard.models.tile import GameTile
from hexboard.util.errors import InvariantViolation
from hexboard.util.hex_math import canonical_hash


@dataclass(frozen=True, eq=False)
class Settlement:
    """An unordered triple of mutually adjacent tiles.

    Attributes:
        tiles: The three tiles sharing the corner.

    Raises:
        InvariantViolation: If the tiles do not form a 3-cycle of neighbors.
    """

    tiles: tuple[GameTile, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        if len(self.tiles) != 3:
            raise InvariantViolation(f"A settlement needs exactly 3 tiles, got {len(self.tiles)}")
        for i, tile in enumerate(self.tiles):
            following = self.tiles[(i + 1) % 3]
            if not tile.is_neighbor(following):
                raise InvariantViolation(
                    f"Settlement tiles {tile.coord!r} and {following.coord!r} are not neighbors"
                )

    @property
    def key(self) -> str:
        """Canonical hash, identical whichever tile discovered the corner."""
        return canonical_hash(t.coord for t in self.tiles)

    def pixel_position(self) -> tuple[float, float]:
        """Centroid of the three tile centres, i.e. the shared corner."""
        points = [t.pixel_position() for t in self.tiles]
        return sum(x for x, _ in points) / 3, sum(y for _, y in points) / 3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Settlement({self.key})"
