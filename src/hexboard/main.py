"""Board renderer entry point.

1. Load configuration (config/board.yaml, overridden by CLI flags)
2. Build the board topology
3. Fit the board into the viewport and lay it out
4. Render to PNG, optionally reporting what lies under a probe point

Usage:
    python -m hexboard.main --seed 7 --out board.png
    # or via entry point:
    hexboard --radius 4 --probe 0 0
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

from hexboard.engine.board_builder import build_board
from hexboard.loaders.board_config_loader import DEFAULT_BOARD_CONFIG_PATH, BoardConfig, load_board_config
from hexboard.rendering.board_view import BoardView
from hexboard.rendering.pil_surface import PillowSurface
from hexboard.util.errors import InvariantViolation

log = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a hexagonal game board to PNG")
    parser.add_argument(
        "--config",
        default=DEFAULT_BOARD_CONFIG_PATH,
        help=f"Board config YAML (default: {DEFAULT_BOARD_CONFIG_PATH})"
    )
    parser.add_argument("--radius", type=int, help="Board radius, overrides config")
    parser.add_argument("--seed", type=int, help="Random seed, overrides config")
    parser.add_argument("--width", type=int, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, help="Viewport height in pixels")
    parser.add_argument(
        "--out",
        default="board.png",
        help="Output PNG path (default: board.png)"
    )
    parser.add_argument(
        "--probe",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        help="Report the element at this board-local point"
    )
    return parser.parse_args(argv)


def apply_overrides(config: BoardConfig, args: argparse.Namespace) -> BoardConfig:
    """Return `config` with every CLI flag that was given applied."""
    overrides = {
        name: getattr(args, name)
        for name in ("radius", "seed", "width", "height")
        if getattr(args, name) is not None
    }
    return replace(config, **overrides) if overrides else config


def render(config: BoardConfig, out: str, probe: Optional[Sequence[float]] = None) -> BoardView:
    """Build, lay out and render one board; returns the view."""
    board = build_board(config.radius, config.hex_size, config.seed)
    view = BoardView(board, config)
    size = view.resize(config.width, config.height)
    log.info("Tile size %.2f px for a %dx%d viewport", size, config.width, config.height)

    if probe is not None:
        x, y = probe
        log.info("Probe (%.1f, %.1f): %r", x, y, view.pointer_move(x, y))

    surface = PillowSurface(config.width, config.height, config.background)
    view.draw(surface, config.width, config.height)
    surface.image.save(out, "PNG")
    log.info("Written %s", out)
    return view


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    args = parse_args(argv)
    try:
        config = apply_overrides(load_board_config(args.config), args)
        render(config, args.out, args.probe)
    except InvariantViolation as e:
        log.error("Board build aborted: %s", e)
        return 1
    except ValueError as e:
        log.error("Invalid board settings: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
