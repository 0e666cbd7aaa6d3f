"""
Tests for the Qt adapter and canvas. Run on the offscreen platform.
"""
import math

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt  # noqa: E402
from PySide6.QtGui import QImage, QPainter  # noqa: E402

from tetrix.config import Mode  # noqa: E402
from tetrix.model.pyramid import Pyramid  # noqa: E402
from tetrix.model.surface import DrawingSurface  # noqa: E402
from tetrix.model.scene import ScrollDelta  # noqa: E402
from tetrix.view.canvas import TetrixCanvas, to_scroll_delta  # noqa: E402
from tetrix.view.surface import QtSurface, parse_rgba, to_qcolor  # noqa: E402


@pytest.mark.parametrize("colour, expected", [
    ("rgba(102,102,153,0.5)", (102, 102, 153, 128)),
    ("rgba( 255 , 0 , 0 , 1 )", (255, 0, 0, 255)),
    ("rgb(0,255,255)", (0, 255, 255, 255)),
    ("rgba(0,0,0,.25)", (0, 0, 0, 64)),
])
def test_parse_rgba(colour, expected):
    assert parse_rgba(colour) == expected


@pytest.mark.parametrize("colour", ["rgba(256,0,0,1)", "rgba(0,0,0,2)", "rgba(1,2)", "blue-ish"])
def test_bad_colours_are_rejected(colour):
    with pytest.raises(ValueError):
        to_qcolor(colour)


def test_named_and_hex_colours_pass_through():
    assert to_qcolor("#ff0000").red() == 255
    assert to_qcolor("white").blue() == 255


def test_wheel_deltas():
    notch_down = to_scroll_delta(0, -120)
    assert notch_down == ScrollDelta(0.0, 100.0)
    assert to_scroll_delta(120, 0).delta_x == -100.0
    # Touchpad pixel deltas win
    assert to_scroll_delta(0, -120, 0, -7) == ScrollDelta(0.0, 7.0)


def _blank(size=100):
    image = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)
    return image


def test_qt_surface_fills_pyramid_faces(qapp):
    image = _blank()
    painter = QPainter(image)
    surface = QtSurface(painter)
    Pyramid(60.0, (50.0, 50.0, 0.0)).rasterize(surface, "rgba(255,0,0,1)")
    painter.end()

    assert isinstance(surface, DrawingSurface)
    assert surface.faces_filled == 4
    centre = image.pixelColor(50, 50)
    assert (centre.red(), centre.green(), centre.blue(), centre.alpha()) == (255, 0, 0, 255)
    assert image.pixelColor(1, 1).alpha() == 0


def test_qt_surface_clear_rect_makes_pixels_transparent(qapp):
    image = _blank()
    image.fill(Qt.GlobalColor.black)
    painter = QPainter(image)
    QtSurface(painter).clear_rect(0, 0, 50, 100)
    painter.end()

    assert image.pixelColor(10, 10).alpha() == 0
    assert image.pixelColor(90, 10).alpha() == 255


def test_canvas_builds_scene_and_rotates_on_scroll(qapp):
    canvas = TetrixCanvas(mode=Mode.REAL_3D, overrides={"side": 120.0, "min_side": 10.0})
    frames = []
    canvas.frame_drawn.connect(frames.append)
    canvas.resize(640, 480)
    canvas.show()
    qapp.processEvents()
    try:
        assert canvas.scene is not None
        assert len(canvas.scene.trees) == 2
        assert frames and frames[-1] == 512

        leaves = canvas.scroll_by(ScrollDelta(360.0, 0.0))
        assert leaves == 512
        assert frames[-1] == 512
        for tree, parallax in zip(canvas.scene.trees, (0.04, -0.04)):
            assert tree.rotation[1] == pytest.approx(parallax + math.pi)
    finally:
        canvas.close()


def test_canvas_clears_area_gained_by_resizing(qapp):
    canvas = TetrixCanvas(mode=Mode.MONO)
    canvas.resize(800, 300)
    canvas.show()
    qapp.processEvents()
    try:
        assert canvas.scene.viewport.width == 800
        canvas.resize(1200, 900)
        qapp.processEvents()
        image = canvas.image
        dpr = image.devicePixelRatio()
        assert image.width() == round(1200 * dpr)

        # Something left over outside the scene's original viewport
        painter = QPainter(image)
        painter.fillRect(1180, 880, 10, 10, Qt.GlobalColor.black)
        painter.end()
        corner = (int(1185 * dpr), int(885 * dpr))
        assert image.pixelColor(*corner).alpha() == 255

        assert canvas.scroll_by(ScrollDelta(0.0, 20.0)) > 0
        assert canvas.image.pixelColor(*corner).alpha() == 0
    finally:
        canvas.close()


def test_canvas_ignores_non_finite_scroll(qapp):
    canvas = TetrixCanvas(mode=Mode.MONO)
    canvas.resize(400, 300)
    canvas.show()
    qapp.processEvents()
    try:
        frames = []
        canvas.frame_drawn.connect(frames.append)
        assert canvas.scroll_by(ScrollDelta(float("nan"), 0.0)) == 0
        assert frames == []
        assert list(canvas.scene.trees[0].rotation) == [0.0, 0.0, 0.0]
    finally:
        canvas.close()
