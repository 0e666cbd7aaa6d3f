"""
QPainter adapter for the DrawingSurface protocol.
"""
from __future__ import annotations

import re

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPainterPath

_RGBA_RE = re.compile(
    r"^\s*rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*(\d*\.?\d+)\s*)?\)\s*$"
)


def parse_rgba(colour: str) -> tuple[int, int, int, int]:
    """
    Parse a CSS "rgb(r,g,b)" / "rgba(r,g,b,a)" string.

    Returns:
        (red, green, blue, alpha) with every channel in 0..255.
    """
    match = _RGBA_RE.match(colour)
    if match is None:
        raise ValueError(f"Not an rgb()/rgba() colour: {colour!r}")
    r, g, b = (int(match.group(i)) for i in (1, 2, 3))
    alpha = float(match.group(4)) if match.group(4) is not None else 1.0
    if max(r, g, b) > 255 or not 0.0 <= alpha <= 1.0:
        raise ValueError(f"Colour channel out of range: {colour!r}")
    return r, g, b, round(alpha * 255)


def to_qcolor(colour: str) -> QColor:
    """Accepts rgba() strings as well as anything QColor understands (#hex, names)."""
    if colour.lstrip().startswith("rgb"):
        return QColor(*parse_rgba(colour))
    qcolor = QColor(colour)
    if not qcolor.isValid():
        raise ValueError(f"Unknown colour: {colour!r}")
    return qcolor


class QtSurface:
    """
    Canvas-2D-style path API on top of an active QPainter.

    The painter is owned by the caller and must stay active while the
    surface is used.
    """
    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self._path = QPainterPath()
        self._colours: dict[str, QColor] = {}
        self.faces_filled: int = 0

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(QPointF(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._path.lineTo(QPointF(x, y))

    def fill(self, colour: str) -> None:
        qcolor = self._colours.get(colour)
        if qcolor is None:
            qcolor = self._colours[colour] = to_qcolor(colour)
        self.painter.fillPath(self._path, qcolor)
        self.faces_filled += 1

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Reset the rectangle to fully transparent pixels."""
        self.painter.save()
        self.painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        self.painter.fillRect(QRectF(x, y, width, height), Qt.GlobalColor.transparent)
        self.painter.restore()
