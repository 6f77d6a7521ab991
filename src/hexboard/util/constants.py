"""Number range, shape proportions and default colours of the board.

All magic numbers of the board layer, centralized here.
"""

# -- Tiles ---------------------------------------------------------------

MIN_NUMBER: int = 2
"""Smallest number a resource tile can carry."""

MAX_NUMBER: int = 12
"""Largest number a resource tile can carry."""

DEFAULT_RADIUS: int = 3
"""Board radius; the outermost ring is placeholder tiles."""

DEFAULT_HEX_SIZE: float = 70.0
"""Tile circumradius in pixels before the board is fitted to a viewport."""

# -- Shape proportions (relative to tile size) ---------------------------

ROAD_LENGTH_RATIO: float = 0.6
ROAD_WIDTH_RATIO: float = 0.12
SETTLEMENT_RADIUS_RATIO: float = 0.15

# -- Colours -------------------------------------------------------------

BACKGROUND_COLOR: str = "lightblue"
PLACEHOLDER_COLOR: str = "lightblue"
TILE_STROKE_COLOR: str = "black"
LABEL_COLOR: str = "black"
ROAD_COLOR: str = "white"
SETTLEMENT_COLOR: str = "white"
HIGHLIGHT_COLOR: str = "gold"

RESOURCE_COLORS: dict[str, str] = {
    "wood": "brown",
    "brick": "red",
    "sheep": "green",
    "wheat": "yellow",
    "ore": "grey",
    "desert": "orange",
}
