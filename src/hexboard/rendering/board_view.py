"""Lays a Board out as shapes and answers pointer queries.

All positions are board-local: the origin is the centre of the board, and
callers translate pointer events and the drawing surface accordingly.
Resizing only re-lays out the shapes; the topology is never rebuilt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from hexboard.loaders.board_config_loader import BoardConfig
from hexboard.models.board import Board
from hexboard.models.road import Road
from hexboard.models.settlement import Settlement
from hexboard.models.tile import GameTile
from hexboard.rendering.shapes import Circle, PointyHexagon, Rectangle, Shape, Surface
from hexboard.util.hex_math import SQRT3, pixel_to_cube

log = logging.getLogger(__name__)

Element = Union[GameTile, Road, Settlement]


@dataclass
class Placed:
    """A board element together with the shape drawn for it."""

    element: Element
    shape: Shape


def fit_tile_size(width: float, height: float, radius: int) -> float:
    """Largest tile size at which a board of `radius` fits the viewport.

    A pointy-top board spans (2R + 1) hex widths (√3·size each) across and
    (3R + 2)·size from top corner to bottom corner.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must be positive, got {width}x{height}")
    return min(width / (SQRT3 * (2 * radius + 1)), height / (3 * radius + 2))


class BoardView:
    """Shapes for every tile, road and settlement of a ready board.

    Args:
        board: The board to show.
        config: Colours and shape proportions.
        assets: Optional name -> image mapping; tiles look up
            ``"<resource>tile"`` and fall back to their colour when absent.
    """

    def __init__(
        self,
        board: Board,
        config: Optional[BoardConfig] = None,
        assets: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.board = board
        self.config = config or BoardConfig()
        self.assets = assets or {}
        self.tiles: list[Placed] = []
        self.roads: list[Placed] = []
        self.settlements: list[Placed] = []
        self.hovered: Optional[Element] = None
        self.selected: Optional[Element] = None
        self.layout()

    # -- Layout ----------------------------------------------------------

    def layout(self) -> None:
        """Rebuild every shape from the tiles' current size."""
        cfg = self.config
        self.tiles = [Placed(t, self._tile_shape(t)) for t in self.board.tiles]
        self.roads = []
        for road in self.board.roads:
            size = road.tiles[0].size
            x, y = road.pixel_position()
            shape = Rectangle.centered(
                x, y,
                size * cfg.road_length_ratio,
                size * cfg.road_width_ratio,
                cfg.road_color,
                road.angle,
            )
            self.roads.append(Placed(road, shape))
        self.settlements = []
        for settlement in self.board.settlements:
            size = settlement.tiles[0].size
            x, y = settlement.pixel_position()
            shape = Circle(x, y, size * cfg.settlement_radius_ratio, cfg.settlement_color)
            self.settlements.append(Placed(settlement, shape))

    def _tile_shape(self, tile: GameTile) -> PointyHexagon:
        cfg = self.config
        x, y = tile.pixel_position()
        if tile.is_placeholder:
            return PointyHexagon(x, y, tile.size, cfg.placeholder_color, cfg.stroke_color)
        name = tile.resource.value
        return PointyHexagon(
            x, y, tile.size,
            cfg.resource_colors.get(name, cfg.placeholder_color),
            cfg.stroke_color,
            image=self.assets.get(f"{name}tile"),
            label=str(tile.number),
            label_color=cfg.label_color,
        )

    def resize(self, width: float, height: float) -> float:
        """Fit the board into a new viewport and re-lay it out.

        Returns:
            The new tile size.
        """
        size = fit_tile_size(width, height, self.board.radius)
        self.board.resize(size)
        self.layout()
        log.debug("Resized to %.0fx%.0f, tile size %.2f", width, height, size)
        return size

    # -- Queries ---------------------------------------------------------

    def hit_test(self, x: float, y: float) -> Optional[Element]:
        """Top-most element under (x, y): settlements, then roads, then tiles."""
        for layer in (self.settlements, self.roads, self.tiles):
            for placed in layer:
                if placed.shape.contains(x, y):
                    return placed.element
        return None

    def tile_at(self, x: float, y: float) -> Optional[GameTile]:
        """Tile whose hex contains (x, y), found by coordinate rounding."""
        tiles = self.board.tiles
        if not tiles:
            return None
        coord = pixel_to_cube(x, y, tiles[0].size)
        if coord is None:
            return None
        return self.board.get_tile(coord)

    def shape_for(self, element: Element) -> Optional[Shape]:
        for layer in (self.settlements, self.roads, self.tiles):
            for placed in layer:
                if self._same(placed.element, element):
                    return placed.shape
        return None

    # -- Pointer events --------------------------------------------------

    def pointer_move(self, x: float, y: float) -> Optional[Element]:
        self.hovered = self.hit_test(x, y)
        return self.hovered

    def click(self, x: float, y: float) -> Optional[Element]:
        """Toggle selection of the element under (x, y)."""
        element = self.hit_test(x, y)
        if element is not None and self._same(element, self.selected):
            self.selected = None
        else:
            self.selected = element
        return element

    # -- Drawing ---------------------------------------------------------

    def draw(self, surface: Surface, width: float, height: float) -> None:
        """Paint the whole board centred in a `width` x `height` surface."""
        surface.set_fill(self.config.background)
        surface.fill_rect(0, 0, width, height)
        surface.save()
        surface.translate(width / 2, height / 2)
        for layer in (self.tiles, self.roads, self.settlements):
            for placed in layer:
                self._draw_placed(surface, placed)
        surface.restore()

    def _draw_placed(self, surface: Surface, placed: Placed) -> None:
        highlighted = self._same(placed.element, self.hovered) or self._same(placed.element, self.selected)
        if not highlighted:
            placed.shape.draw(surface)
            return
        original = placed.shape.fill
        placed.shape.fill = self.config.highlight_color
        try:
            placed.shape.draw(surface)
        finally:
            placed.shape.fill = original

    @staticmethod
    def _same(a: Optional[Element], b: Optional[Element]) -> bool:
        return a is not None and b is not None and type(a) is type(b) and a == b
