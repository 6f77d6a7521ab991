"""Board model — tiles, roads and settlements keyed by coordinate hash.

The three maps are the single source of truth; the list views are derived
on access. Mutation is only allowed while the board is being built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from hexboard.models.hex import CubeCoord
from hexboard.models.road import Road
from hexboard.models.settlement import Settlement
from hexboard.models.tile import GameTile
from hexboard.util.errors import InvariantViolation
from hexboard.util.hex_math import board_cell_count, canonical_hash, is_outer_ring


class BoardStage(Enum):
    """Build progress of a board."""

    UNINITIALIZED = "uninitialized"
    TILES_PLACED = "tiles_placed"
    ROADS_BUILT = "roads_built"
    SETTLEMENTS_BUILT = "settlements_built"
    READY = "ready"


@dataclass
class Board:
    """A hexagonal game board.

    Attributes:
        radius: Board radius; the ring at this distance holds placeholders.
        stage: Current build stage.
        tile_map: Coordinate hash -> tile.
        road_map: Canonical pair hash -> road.
        settlement_map: Canonical triad hash -> settlement.
    """

    radius: int
    stage: BoardStage = BoardStage.UNINITIALIZED
    tile_map: dict[str, GameTile] = field(default_factory=dict)
    road_map: dict[str, Road] = field(default_factory=dict)
    settlement_map: dict[str, Settlement] = field(default_factory=dict)

    # -- Derived views ---------------------------------------------------

    @property
    def tiles(self) -> list[GameTile]:
        return list(self.tile_map.values())

    @property
    def roads(self) -> list[Road]:
        return list(self.road_map.values())

    @property
    def settlements(self) -> list[Settlement]:
        return list(self.settlement_map.values())

    @property
    def resource_tiles(self) -> list[GameTile]:
        return [t for t in self.tile_map.values() if t.is_resource]

    @property
    def placeholder_tiles(self) -> list[GameTile]:
        return [t for t in self.tile_map.values() if t.is_placeholder]

    @property
    def is_ready(self) -> bool:
        return self.stage is BoardStage.READY

    # -- Queries ---------------------------------------------------------

    def get_tile(self, coord: CubeCoord) -> Optional[GameTile]:
        """Return the tile at `coord`, or None past the board edge."""
        return self.tile_map.get(coord.key)

    def resolve(self, coords: tuple[CubeCoord, ...]) -> Optional[tuple[GameTile, ...]]:
        """Map every coordinate to its tile; None if any of them is missing."""
        tiles = tuple(self.get_tile(c) for c in coords)
        if any(t is None for t in tiles):
            return None
        return tiles

    # -- Mutation (build time only) -------------------------------------

    def add_tile(self, tile: GameTile) -> bool:
        """Insert a tile. Returns False if its coordinate is already taken."""
        self._ensure_mutable()
        if tile.coord.key in self.tile_map:
            return False
        self.tile_map[tile.coord.key] = tile
        return True

    def add_road(self, road: Road) -> bool:
        """Insert a road. Returns False if the same edge already exists."""
        self._ensure_mutable()
        if road.key in self.road_map:
            return False
        self.road_map[road.key] = road
        return True

    def add_settlement(self, settlement: Settlement) -> bool:
        """Insert a settlement. Returns False if the same corner already exists."""
        self._ensure_mutable()
        if settlement.key in self.settlement_map:
            return False
        self.settlement_map[settlement.key] = settlement
        return True

    def resize(self, size: float) -> None:
        """Set every tile's pixel size. Topology is untouched."""
        if size <= 0:
            raise ValueError(f"Tile size must be positive, got {size}")
        for tile in self.tile_map.values():
            tile.size = size

    # -- Validation ------------------------------------------------------

    def validate(self) -> None:
        """Re-check the topology invariants.

        Raises:
            InvariantViolation: On the first violated invariant.
        """
        expected = board_cell_count(self.radius)
        if len(self.tile_map) != expected:
            raise InvariantViolation(
                f"Board of radius {self.radius} must have {expected} tiles, has {len(self.tile_map)}"
            )
        for key, tile in self.tile_map.items():
            if key != tile.coord.key:
                raise InvariantViolation(f"Tile {tile!r} stored under foreign key {key!r}")
            if tile.coord.distance_to(CubeCoord(0, 0, 0)) > self.radius:
                raise InvariantViolation(f"Tile {tile!r} lies outside radius {self.radius}")
            if tile.is_placeholder != is_outer_ring(tile.coord, self.radius):
                raise InvariantViolation(f"Tile {tile!r} has the wrong kind for its ring")
        for elements in (self.road_map, self.settlement_map):
            for key, element in elements.items():
                if key != canonical_hash(t.coord for t in element.tiles):
                    raise InvariantViolation(f"{element!r} stored under foreign key {key!r}")
                for tile in element.tiles:
                    if self.tile_map.get(tile.coord.key) is not tile:
                        raise InvariantViolation(f"{element!r} references a tile not on the board")

    def _ensure_mutable(self) -> None:
        if self.stage is BoardStage.READY:
            raise RuntimeError("Board is ready and can no longer be modified")
