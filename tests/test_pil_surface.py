"""Tests for the Pillow drawing surface."""

import math

from PIL import Image, ImageChops

from hexboard.engine.board_builder import build_board
from hexboard.rendering.board_view import BoardView
from hexboard.rendering.pil_surface import PillowSurface
from hexboard.rendering.shapes import Circle, PointyHexagon, Rectangle

RED = (255, 0, 0, 255)
WHITE = (255, 255, 255, 255)
GREEN = (0, 255, 0, 255)


class TestTransforms:
    def test_fill_rect(self):
        s = PillowSurface(50, 50)
        s.set_fill("#ff0000")
        s.fill_rect(10, 10, 20, 20)
        assert s.image.getpixel((20, 20)) == RED
        assert s.image.getpixel((5, 5)) == WHITE

    def test_translate(self):
        s = PillowSurface(50, 50)
        s.translate(20, 20)
        s.set_fill("#ff0000")
        s.fill_rect(0, 0, 10, 10)
        assert s.image.getpixel((25, 25)) == RED
        assert s.image.getpixel((5, 5)) == WHITE

    def test_restore_undoes_transform_and_colour(self):
        s = PillowSurface(50, 50)
        s.set_fill("#ff0000")
        s.save()
        s.translate(100, 100)
        s.set_fill("#00ff00")
        s.restore()
        s.fill_rect(0, 0, 5, 5)
        assert s.image.getpixel((2, 2)) == RED

    def test_rotate(self):
        s = PillowSurface(50, 50)
        s.translate(25, 25)
        s.rotate(math.pi / 2)
        s.set_fill("#ff0000")
        s.fill_rect(0, -2, 20, 4)
        assert s.image.getpixel((25, 40)) == RED
        assert s.image.getpixel((40, 25)) == WHITE


class TestShapes:
    def test_circle(self):
        s = PillowSurface(50, 50)
        Circle(25, 25, 10, "#ff0000").draw(s)
        assert s.image.getpixel((25, 25)) == RED
        assert s.image.getpixel((25, 32)) == RED
        assert s.image.getpixel((2, 2)) == WHITE

    def test_rotated_rectangle(self):
        s = PillowSurface(60, 60)
        Rectangle.centered(30, 30, 40, 4, "#ff0000", rotation=math.pi / 2).draw(s)
        assert s.image.getpixel((30, 45)) == RED
        assert s.image.getpixel((45, 30)) == WHITE

    def test_hexagon_with_image_is_clipped(self):
        s = PillowSurface(100, 100)
        texture = Image.new("RGBA", (8, 8), "#00ff00")
        PointyHexagon(50, 50, 20, "#ff0000", "#000000", image=texture).draw(s)
        assert s.image.getpixel((50, 50)) == GREEN
        # inside the image box but outside the hexagon
        assert s.image.getpixel((31, 31)) == WHITE

    def test_hexagon_without_image(self):
        s = PillowSurface(100, 100)
        PointyHexagon(50, 50, 20, "#ff0000", "#000000").draw(s)
        assert s.image.getpixel((50, 55)) == RED

    def test_text_is_drawn(self):
        s = PillowSurface(60, 60)
        before = s.image.copy()
        s.set_fill("#000000")
        s.fill_text("12", 30, 30)
        # the difference keeps alpha at 0, so look at the colour bands too
        assert ImageChops.difference(before, s.image).getbbox(alpha_only=False) is not None


class TestBoardRender:
    def test_renders_whole_board(self):
        view = BoardView(build_board(3, seed=5))
        view.resize(400, 350)
        s = PillowSurface(400, 350, view.config.background)
        view.draw(s, 400, 350)
        centre = view.board.get_tile(view.hit_test(0, 0).coord)
        colour = Image.new("RGBA", (1, 1), view.config.resource_colors[centre.resource.value])
        # 15px below the centre, clear of the number label
        assert s.image.getpixel((200, 190)) == colour.getpixel((0, 0))
