"""
Fractal canvas widget.

Paints the scene into an owned QImage backing store, sized in device
pixels, and blits it on paint. Every wheel event clears and redraws the
store before the next event is processed.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QImage, QPainter, QPaintEvent, QResizeEvent, QWheelEvent
from PySide6.QtWidgets import QWidget

from tetrix.config import Mode, TetrixConfig, Viewport
from tetrix.model.scene import Scene, ScrollDelta
from tetrix.view.surface import QtSurface

logger = logging.getLogger(__name__)

# One mouse-wheel notch is 120 eighths of a degree, and a browser reports
# about 100 scroll units for it.
ANGLE_DELTA_PER_NOTCH = 120
SCROLL_UNITS_PER_NOTCH = 100


def to_scroll_delta(angle_x: int, angle_y: int, pixel_x: int = 0, pixel_y: int = 0) -> ScrollDelta:
    """
    Convert Qt wheel deltas to scroll units.

    Pixel deltas (touchpads) win over angle deltas. Signs are flipped so
    that scrolling down gives a positive delta_y.
    """
    if pixel_x or pixel_y:
        return ScrollDelta(float(-pixel_x), float(-pixel_y))
    return ScrollDelta(
        -angle_x * SCROLL_UNITS_PER_NOTCH / ANGLE_DELTA_PER_NOTCH,
        -angle_y * SCROLL_UNITS_PER_NOTCH / ANGLE_DELTA_PER_NOTCH,
    )


class TetrixCanvas(QWidget):
    """
    Drawing area for the fractal.

    The Scene is created from the widget's first size and device-pixel
    ratio and kept for the rest of the session.
    """
    frame_drawn = Signal(int)

    def __init__(
        self,
        mode: Mode = Mode.MONO,
        overrides: dict[str, Any] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.mode = mode
        self._overrides = overrides or {}
        self.scene: Scene | None = None
        self._buffer: QImage | None = None

        self.setMinimumSize(320, 240)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def viewport(self) -> Viewport:
        return Viewport(
            width=max(1, self.width()),
            height=max(1, self.height()),
            scale=self.devicePixelRatioF(),
        )

    @property
    def image(self) -> QImage | None:
        """The backing store the scene is painted into."""
        return self._buffer

    def scroll_by(self, delta: ScrollDelta) -> int:
        """Rotate the scene by one scroll event and redraw."""
        if self.scene is None or self._buffer is None or not delta.is_finite:
            return 0
        return self._paint(lambda surface: self.scene.scroll(surface, delta.delta_x, delta.delta_y))

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._ensure_scene()
        self._allocate_buffer()
        self._paint(self.scene.render)

    def wheelEvent(self, event: QWheelEvent) -> None:
        event.accept()
        angle = event.angleDelta()
        pixel = event.pixelDelta()
        self.scroll_by(to_scroll_delta(angle.x(), angle.y(), pixel.x(), pixel.y()))

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), Qt.GlobalColor.white)
        if self._buffer is not None:
            painter.drawImage(0, 0, self._buffer)
        painter.end()

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    def _ensure_scene(self) -> None:
        if self.scene is not None:
            return
        viewport = self.viewport()
        config = TetrixConfig.for_mode(self.mode, viewport, **self._overrides)
        self.scene = Scene.from_config(config, viewport)

    def _allocate_buffer(self) -> None:
        viewport = self.viewport()
        width, height = viewport.device_size
        image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
        image.setDevicePixelRatio(viewport.scale)
        image.fill(Qt.GlobalColor.transparent)
        self._buffer = image
        logger.debug(f"Backing store allocated: {width}x{height} px (scale {viewport.scale})")

    def _paint(self, action: Callable[[QtSurface], int]) -> int:
        painter = QPainter(self._buffer)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            surface = QtSurface(painter)
            # Scene.clear only covers the viewport the scene was built for
            surface.clear_rect(0.0, 0.0, self.width(), self.height())
            leaves = action(surface)
        finally:
            painter.end()
        self.update()
        self.frame_drawn.emit(leaves)
        return leaves
