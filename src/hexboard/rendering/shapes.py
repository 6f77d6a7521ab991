"""Drawable shapes with hit-testing.

Every shape can draw itself on a Surface and answer whether a board-local
point lies inside it. Degenerate shapes (non-positive radius or size)
never contain anything.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol

from hexboard.util.hex_math import hex_corners


class Surface(Protocol):
    """Drawing handle the shapes paint on (canvas-style 2D context)."""

    def begin_path(self) -> None: ...
    def close_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None: ...
    def fill(self) -> None: ...
    def stroke(self) -> None: ...
    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...
    def set_fill(self, color: str) -> None: ...
    def set_stroke(self, color: str) -> None: ...
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def translate(self, x: float, y: float) -> None: ...
    def rotate(self, angle: float) -> None: ...
    def clip(self) -> None: ...
    def draw_image(self, image: Any, x: float, y: float, width: float, height: float) -> None: ...
    def fill_text(self, text: str, x: float, y: float) -> None: ...


class Shape(ABC):
    """Something that can be drawn and hit-tested."""

    fill: str

    @abstractmethod
    def draw(self, surface: Surface) -> None:
        ...

    @abstractmethod
    def contains(self, x: float, y: float) -> bool:
        ...


class Circle(Shape):
    def __init__(self, x: float, y: float, radius: float, fill: str) -> None:
        self.x = x
        self.y = y
        self.radius = radius
        self.fill = fill

    def draw(self, surface: Surface) -> None:
        surface.set_fill(self.fill)
        surface.begin_path()
        surface.arc(self.x, self.y, self.radius, 0, 2 * math.pi)
        surface.fill()

    def contains(self, x: float, y: float) -> bool:
        if self.radius <= 0:
            return False
        dx = x - self.x
        dy = y - self.y
        return dx * dx + dy * dy <= self.radius * self.radius


class Rectangle(Shape):
    """Axis-aligned box at (x, y) top-left, rotated about its own centre."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: str,
        rotation: float = 0.0,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.fill = fill
        self.rotation = rotation

    @classmethod
    def centered(
        cls, cx: float, cy: float, width: float, height: float, fill: str, rotation: float = 0.0
    ) -> Rectangle:
        return cls(cx - width / 2, cy - height / 2, width, height, fill, rotation)

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def draw(self, surface: Surface) -> None:
        cx, cy = self.center
        surface.save()
        surface.translate(cx, cy)
        surface.rotate(self.rotation)
        surface.set_fill(self.fill)
        surface.fill_rect(-self.width / 2, -self.height / 2, self.width, self.height)
        surface.restore()

    def contains(self, x: float, y: float) -> bool:
        if self.width <= 0 or self.height <= 0:
            return False
        cx, cy = self.center
        dx = x - cx
        dy = y - cy
        # Undo the rotation to get back into the box's own frame
        cos_a = math.cos(-self.rotation)
        sin_a = math.sin(-self.rotation)
        local_x = dx * cos_a - dy * sin_a
        local_y = dx * sin_a + dy * cos_a
        return abs(local_x) <= self.width / 2 and abs(local_y) <= self.height / 2


class PointyHexagon(Shape):
    """Regular hexagon with a corner pointing straight up."""

    def __init__(
        self,
        x: float,
        y: float,
        size: float,
        fill: str,
        stroke: str = "black",
        image: Optional[Any] = None,
        label: Optional[str] = None,
        label_color: str = "black",
    ) -> None:
        self.x = x
        self.y = y
        self.size = size
        self.fill = fill
        self.stroke = stroke
        self.image = image
        self.label = label
        self.label_color = label_color

    def corners(self) -> list[tuple[float, float]]:
        """Corners at 30° + 60°·i, starting south-east and going clockwise."""
        return hex_corners(self.x, self.y, self.size)

    def _trace(self, surface: Surface) -> None:
        surface.begin_path()
        for i, (px, py) in enumerate(self.corners()):
            if i == 0:
                surface.move_to(px, py)
            else:
                surface.line_to(px, py)
        surface.close_path()

    def draw(self, surface: Surface) -> None:
        self._trace(surface)
        surface.set_stroke(self.stroke)
        surface.set_fill(self.fill)
        surface.fill()
        if self.image is not None:
            surface.save()
            surface.clip()
            side = self.size * 2
            surface.draw_image(self.image, self.x - side / 2, self.y - side / 2, side, side)
            surface.restore()
            self._trace(surface)
        surface.stroke()
        if self.label:
            surface.set_fill(self.label_color)
            surface.fill_text(self.label, self.x, self.y)

    def contains(self, x: float, y: float) -> bool:
        if self.size <= 0:
            return False
        corners = self.corners()
        # Fan of six triangles from the centre
        for i in range(6):
            b = corners[i]
            c = corners[(i + 1) % 6]
            if point_in_triangle((x, y), (self.x, self.y), b, c):
                return True
        return False


def point_in_triangle(
    p: tuple[float, float],
    a: tuple[float, float],
    b: tuple[float, float],
    c: tuple[float, float],
) -> bool:
    """Barycentric containment test.

    Weights w1, w2 express p - a in terms of the edge vectors b - a and
    c - a; p is inside iff both are non-negative and sum to at most 1.
    A degenerate (zero-area) triangle contains nothing.
    """
    e1x, e1y = b[0] - a[0], b[1] - a[1]
    e2x, e2y = c[0] - a[0], c[1] - a[1]
    px, py = p[0] - a[0], p[1] - a[1]

    denom = e1x * e2y - e2x * e1y
    if denom == 0:
        return False
    w1 = (px * e2y - e2x * py) / denom
    w2 = (e1x * py - px * e1y) / denom
    return w1 >= 0 and w2 >= 0 and w1 + w2 <= 1
