"""Board builder — places tiles and derives roads and settlements.

Build stages run strictly in order:
1. place_tiles: one tile per cell, placeholders on the outer ring,
   resource tiles with a random resource and number inside
2. build_roads: one road per edge between two resource tiles
3. build_settlements: one settlement per corner shared by three tiles
4. finalize: validate and freeze the board

Roads and settlements are discovered from every resource tile and
deduplicated by canonical hash, so an element reached again from a
neighbor's side is dropped.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from hexboard.models.board import Board, BoardStage
from hexboard.models.hex import EdgeDirection, VertexDirection
from hexboard.models.road import Road
from hexboard.models.settlement import Settlement
from hexboard.models.tile import GameTile, Resource
from hexboard.util.constants import DEFAULT_HEX_SIZE, MAX_NUMBER, MIN_NUMBER
from hexboard.util.hex_math import board_coordinates, is_outer_ring

log = logging.getLogger(__name__)


class BoardBuilder:
    """Builds a Board of a given radius stage by stage.

    Args:
        radius: Board radius (>= 1).
        size: Initial tile size in pixels.
        rng: Random source for resources and numbers (default: fresh Random).
    """

    def __init__(
        self,
        radius: int,
        size: float = DEFAULT_HEX_SIZE,
        rng: Optional[random.Random] = None,
    ) -> None:
        if radius < 1:
            raise ValueError(f"Board radius must be at least 1, got {radius}")
        if size <= 0:
            raise ValueError(f"Tile size must be positive, got {size}")
        self.size = size
        self.rng = rng or random.Random()
        self.board = Board(radius=radius)

    @property
    def stage(self) -> BoardStage:
        return self.board.stage

    # -- Stages ----------------------------------------------------------

    def place_tiles(self) -> None:
        self._expect(BoardStage.UNINITIALIZED)
        radius = self.board.radius
        for coord in board_coordinates(radius):
            if is_outer_ring(coord, radius):
                tile = GameTile.placeholder(coord, self.size)
            else:
                tile = GameTile.resource_tile(
                    coord, self.size, self._random_resource(), self._random_number()
                )
            self.board.add_tile(tile)
        self.board.stage = BoardStage.TILES_PLACED
        log.debug(
            "Placed %d tiles (%d resource, %d placeholder)",
            len(self.board.tile_map),
            len(self.board.resource_tiles),
            len(self.board.placeholder_tiles),
        )

    def build_roads(self) -> None:
        self._expect(BoardStage.TILES_PLACED)
        for tile in self.board.resource_tiles:
            for direction in EdgeDirection:
                # Placeholder neighbors are not playable, so no road there
                pair = self.board.resolve(tile.edge_coordinates(direction))
                if pair is None or not all(t.is_resource for t in pair):
                    continue
                self.board.add_road(Road(pair))
        self.board.stage = BoardStage.ROADS_BUILT
        log.debug("Built %d roads", len(self.board.road_map))

    def build_settlements(self) -> None:
        self._expect(BoardStage.ROADS_BUILT)
        for tile in self.board.resource_tiles:
            for direction in VertexDirection:
                triad = self.board.resolve(tile.vertex_coordinates(direction))
                if triad is None:
                    continue
                self.board.add_settlement(Settlement(triad))
        self.board.stage = BoardStage.SETTLEMENTS_BUILT
        log.debug("Built %d settlements", len(self.board.settlement_map))

    def finalize(self) -> Board:
        self._expect(BoardStage.SETTLEMENTS_BUILT)
        self.board.validate()
        self.board.stage = BoardStage.READY
        return self.board

    def build(self) -> Board:
        """Run every stage and return the ready board.

        Raises:
            InvariantViolation: If any road, settlement or tile is malformed;
                no board is returned in that case.
        """
        self.place_tiles()
        self.build_roads()
        self.build_settlements()
        board = self.finalize()
        log.info(
            "Board ready: radius %d, %d tiles, %d roads, %d settlements",
            board.radius,
            len(board.tile_map),
            len(board.road_map),
            len(board.settlement_map),
        )
        return board

    # -- Internal --------------------------------------------------------

    def _random_resource(self) -> Resource:
        return self.rng.choice(list(Resource))

    def _random_number(self) -> int:
        return self.rng.randint(MIN_NUMBER, MAX_NUMBER)

    def _expect(self, stage: BoardStage) -> None:
        if self.board.stage is not stage:
            raise RuntimeError(
                f"Build step needs stage {stage.value}, board is {self.board.stage.value}"
            )


def build_board(radius: int, size: float = DEFAULT_HEX_SIZE, seed: Optional[int] = None) -> Board:
    """Build a ready board, optionally reproducible from `seed`."""
    return BoardBuilder(radius, size, random.Random(seed)).build()
