"""Board configuration — loads layout and colour settings from config/board.yaml.

Provides a single ``BoardConfig`` dataclass that is loaded once at startup
and then passed wherever board size, viewport or colours are needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from hexboard.util import constants

log = logging.getLogger(__name__)

DEFAULT_BOARD_CONFIG_PATH = "config/board.yaml"


@dataclass
class BoardConfig:
    """All tunable board settings.

    Loaded from ``config/board.yaml``.  Every field has a sensible default
    so the board can be built even without the file.
    """

    # -- Board -------------------------------------------------------
    radius: int = constants.DEFAULT_RADIUS
    hex_size: float = constants.DEFAULT_HEX_SIZE
    seed: Optional[int] = None

    # -- Viewport ----------------------------------------------------
    width: int = 800
    height: int = 700

    # -- Shape proportions -------------------------------------------
    road_length_ratio: float = constants.ROAD_LENGTH_RATIO
    road_width_ratio: float = constants.ROAD_WIDTH_RATIO
    settlement_radius_ratio: float = constants.SETTLEMENT_RADIUS_RATIO

    # -- Colours -----------------------------------------------------
    background: str = constants.BACKGROUND_COLOR
    placeholder_color: str = constants.PLACEHOLDER_COLOR
    stroke_color: str = constants.TILE_STROKE_COLOR
    label_color: str = constants.LABEL_COLOR
    road_color: str = constants.ROAD_COLOR
    settlement_color: str = constants.SETTLEMENT_COLOR
    highlight_color: str = constants.HIGHLIGHT_COLOR
    resource_colors: Dict[str, str] = field(
        default_factory=lambda: dict(constants.RESOURCE_COLORS)
    )

    def __post_init__(self) -> None:
        if self.radius < 1:
            raise ValueError(f"radius must be at least 1, got {self.radius}")
        for name in ("hex_size", "width", "height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")


def load_board_config(path: str = DEFAULT_BOARD_CONFIG_PATH) -> BoardConfig:
    """Load board configuration from a YAML file.

    Missing keys fall back to dataclass defaults.  If the file does not
    exist, a warning is logged and pure defaults are returned.
    """
    p = Path(path)
    if not p.exists():
        log.warning("Board config not found at %s, using defaults", p)
        return BoardConfig()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}

    log.info("Loaded board config from %s (%d keys)", p, len(raw))

    # Partial colour tables extend the defaults
    colors = dict(constants.RESOURCE_COLORS)
    colors.update(raw.pop("resource_colors", None) or {})

    return BoardConfig(resource_colors=colors, **{
        k: v for k, v in raw.items()
        if k in BoardConfig.__dataclass_fields__
    })
