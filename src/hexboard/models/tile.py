"""Tile models: hexagons placed on the board.

A HexTile is one pointy-top hexagon at a fixed cube coordinate with a
mutable pixel size. GameTile tags a HexTile as either a playable resource
tile or a placeholder on the unplayable outer ring.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from enum import Enum
from typing import Iterable, Optional

from hexboard.models.hex import (
    VERTEX_EDGES,
    CubeCoord,
    EdgeDirection,
    VertexDirection,
)
from hexboard.util.constants import MAX_NUMBER, MIN_NUMBER
from hexboard.util.hex_math import coordinates_are_equal, cube_to_pixel, hex_corners


@dataclass(eq=False)
class HexTile:
    """A single hexagon on the board.

    Identity is by coordinate: two tiles at the same coordinate are equal.

    Attributes:
        coord: Cube coordinate, fixed for the tile's lifetime.
        size: Circumradius in pixels; changes when the viewport is resized.
    """

    coord: CubeCoord
    size: float

    _fixed = ("coord",)

    def __setattr__(self, name: str, value: object) -> None:
        if name in self._fixed and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r} after creation")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexTile):
            return NotImplemented
        return coordinates_are_equal(self.coord, other.coord)

    def __hash__(self) -> int:
        return hash(self.coord)

    # -- Pixel geometry --------------------------------------------------

    def pixel_position(self) -> tuple[float, float]:
        """Centre of the hexagon in board-local pixels."""
        return cube_to_pixel(self.coord, self.size)

    def vertex_pixel_positions(self) -> list[tuple[float, float]]:
        """The six corners, at 30° + 60°·i around the centre."""
        return hex_corners(*self.pixel_position(), self.size)

    # -- Topology --------------------------------------------------------

    def neighbor_coordinate(self, direction: EdgeDirection) -> CubeCoord:
        return self.coord.neighbor(direction)

    def vertex_coordinates(self, direction: VertexDirection) -> tuple[CubeCoord, CubeCoord, CubeCoord]:
        """The three hexes meeting at the given corner, this one first."""
        first, second = VERTEX_EDGES[direction]
        return (
            self.coord,
            self.neighbor_coordinate(first),
            self.neighbor_coordinate(second),
        )

    def all_vertex_coordinates(self) -> dict[VertexDirection, tuple[CubeCoord, CubeCoord, CubeCoord]]:
        return {d: self.vertex_coordinates(d) for d in VertexDirection}

    def edge_coordinates(self, direction: EdgeDirection) -> tuple[CubeCoord, CubeCoord]:
        """The two hexes separated by the given side, this one first."""
        return self.coord, self.neighbor_coordinate(direction)

    def all_edge_coordinates(self) -> dict[EdgeDirection, tuple[CubeCoord, CubeCoord]]:
        return {d: self.edge_coordinates(d) for d in EdgeDirection}

    def is_neighbor(self, other: HexTile) -> bool:
        """True if `other` sits across one of this tile's six sides."""
        return any(
            coordinates_are_equal(other.coord, self.neighbor_coordinate(d))
            for d in EdgeDirection
        )


def vertices_are_equal(a: Iterable[CubeCoord], b: Iterable[CubeCoord]) -> bool:
    """Order-independent comparison of two corner triads."""
    return set(a) == set(b)


def edges_are_equal(a: Iterable[CubeCoord], b: Iterable[CubeCoord]) -> bool:
    """Order-independent comparison of two side pairs."""
    return set(a) == set(b)


class Resource(Enum):
    """What a resource tile produces."""

    WOOD = "wood"
    BRICK = "brick"
    SHEEP = "sheep"
    WHEAT = "wheat"
    ORE = "ore"
    DESERT = "desert"


class TileKind(Enum):
    RESOURCE = "resource"
    PLACEHOLDER = "placeholder"


@dataclass(eq=False)
class GameTile(HexTile):
    """A board tile tagged by kind.

    Resource tiles carry a resource and a number in [2, 12]; placeholder
    tiles (the outer ring) carry neither. Both are set once at creation. Only
    ``size`` may be reassigned.

    Attributes:
        kind: Which variant this tile is.
        resource: Produced resource (resource tiles only).
        number: Dice number (resource tiles only).
    """

    kind: TileKind = TileKind.PLACEHOLDER
    resource: Optional[Resource] = None
    number: Optional[int] = None

    _fixed = ("coord", "kind", "resource", "number")

    def __post_init__(self) -> None:
        if self.kind is TileKind.RESOURCE:
            if self.resource is None or self.number is None:
                raise ValueError(f"Resource tile at {self.coord!r} needs a resource and a number")
            if not MIN_NUMBER <= self.number <= MAX_NUMBER:
                raise ValueError(
                    f"Tile number {self.number} outside [{MIN_NUMBER}, {MAX_NUMBER}]"
                )
        elif self.resource is not None or self.number is not None:
            raise ValueError(f"Placeholder tile at {self.coord!r} cannot carry resource data")

    @classmethod
    def resource_tile(cls, coord: CubeCoord, size: float, resource: Resource, number: int) -> GameTile:
        return cls(coord, size, TileKind.RESOURCE, resource, number)

    @classmethod
    def placeholder(cls, coord: CubeCoord, size: float) -> GameTile:
        return cls(coord, size, TileKind.PLACEHOLDER)

    @property
    def is_resource(self) -> bool:
        return self.kind is TileKind.RESOURCE

    @property
    def is_placeholder(self) -> bool:
        return self.kind is TileKind.PLACEHOLDER

    def __repr__(self) -> str:
        if self.is_resource:
            return f"GameTile({self.coord!r}, {self.resource.value}, {self.number})"
        return f"GameTile({self.coord!r}, placeholder)"
