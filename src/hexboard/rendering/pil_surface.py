"""Pillow-backed drawing surface.

Implements the canvas-style Surface protocol on top of PIL.ImageDraw so a
board can be rendered off-screen and written to PNG. Paths and rectangles
go through a save/restore-able affine transform; clipping applies to
images only.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Optional

from PIL import Image, ImageChops, ImageDraw, ImageFont

# (a, b, c, d, e, f): x' = a*x + c*y + e, y' = b*x + d*y + f
Transform = tuple[float, float, float, float, float, float]

IDENTITY: Transform = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

ARC_SEGMENTS_PER_TURN = 48


@dataclass
class _State:
    transform: Transform = IDENTITY
    fill: str = "black"
    stroke: str = "black"
    clip: Optional[Image.Image] = None


@dataclass
class _SubPath:
    points: list[tuple[float, float]] = field(default_factory=list)
    closed: bool = False


class PillowSurface:
    """Off-screen RGBA image with a 2D-context style API.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        background: Initial fill colour (any PIL colour string).
        line_width: Stroke width in pixels.
    """

    def __init__(self, width: int, height: int, background: str = "white", line_width: int = 1) -> None:
        self.image = Image.new("RGBA", (width, height), background)
        self.line_width = line_width
        self._draw = ImageDraw.Draw(self.image)
        self._font = ImageFont.load_default()
        self._state = _State()
        self._stack: list[_State] = []
        self._paths: list[_SubPath] = []

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    # -- State -----------------------------------------------------------

    def save(self) -> None:
        self._stack.append(replace(self._state))

    def restore(self) -> None:
        if self._stack:
            self._state = self._stack.pop()

    def set_fill(self, color: str) -> None:
        self._state.fill = color

    def set_stroke(self, color: str) -> None:
        self._state.stroke = color

    def translate(self, x: float, y: float) -> None:
        a, b, c, d, e, f = self._state.transform
        self._state.transform = (a, b, c, d, e + a * x + c * y, f + b * x + d * y)

    def rotate(self, angle: float) -> None:
        a, b, c, d, e, f = self._state.transform
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self._state.transform = (
            a * cos_a + c * sin_a,
            b * cos_a + d * sin_a,
            -a * sin_a + c * cos_a,
            -b * sin_a + d * cos_a,
            e,
            f,
        )

    def _apply(self, x: float, y: float) -> tuple[float, float]:
        a, b, c, d, e, f = self._state.transform
        return a * x + c * y + e, b * x + d * y + f

    # -- Paths -----------------------------------------------------------

    def begin_path(self) -> None:
        self._paths = []

    def move_to(self, x: float, y: float) -> None:
        self._paths.append(_SubPath([self._apply(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        if not self._paths:
            self._paths.append(_SubPath())
        self._paths[-1].points.append(self._apply(x, y))

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        sweep = end - start
        segments = max(8, int(abs(sweep) / (2 * math.pi) * ARC_SEGMENTS_PER_TURN))
        for i in range(segments + 1):
            angle = start + sweep * i / segments
            self.line_to(x + radius * math.cos(angle), y + radius * math.sin(angle))

    def close_path(self) -> None:
        if self._paths:
            self._paths[-1].closed = True

    def fill(self) -> None:
        for sub in self._paths:
            if len(sub.points) >= 3:
                self._draw.polygon(sub.points, fill=self._state.fill)

    def stroke(self) -> None:
        for sub in self._paths:
            if len(sub.points) < 2:
                continue
            points = sub.points + [sub.points[0]] if sub.closed else sub.points
            self._draw.line(points, fill=self._state.stroke, width=self.line_width)

    def clip(self) -> None:
        """Restrict subsequent images to the current path."""
        mask = Image.new("L", self.image.size, 0)
        drawer = ImageDraw.Draw(mask)
        for sub in self._paths:
            if len(sub.points) >= 3:
                drawer.polygon(sub.points, fill=255)
        if self._state.clip is not None:
            mask = ImageChops.multiply(mask, self._state.clip)
        self._state.clip = mask

    # -- Direct drawing --------------------------------------------------

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        corners = [
            self._apply(x, y),
            self._apply(x + width, y),
            self._apply(x + width, y + height),
            self._apply(x, y + height),
        ]
        self._draw.polygon(corners, fill=self._state.fill)

    def draw_image(self, image: Image.Image, x: float, y: float, width: float, height: float) -> None:
        """Paste `image` scaled into the box; rotation is ignored."""
        x0, y0 = self._apply(x, y)
        x1, y1 = self._apply(x + width, y + height)
        left, top = int(round(min(x0, x1))), int(round(min(y0, y1)))
        w = max(1, int(round(abs(x1 - x0))))
        h = max(1, int(round(abs(y1 - y0))))

        scaled = image.convert("RGBA").resize((w, h))
        mask = scaled.getchannel("A")
        if self._state.clip is not None:
            mask = ImageChops.multiply(mask, self._state.clip.crop((left, top, left + w, top + h)))
        self.image.paste(scaled, (left, top), mask)

    def fill_text(self, text: str, x: float, y: float) -> None:
        """Draw `text` centred on (x, y)."""
        cx, cy = self._apply(x, y)
        left, top, right, bottom = self._draw.textbbox((0, 0), text, font=self._font)
        origin = (cx - (right - left) / 2 - left, cy - (bottom - top) / 2 - top)
        self._draw.text(origin, text, fill=self._state.fill, font=self._font)
