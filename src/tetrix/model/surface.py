"""
Drawing surface seam between the fractal and whatever paints it.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DrawingSurface(Protocol):
    """
    The subset of a 2D canvas context the renderer needs.

    Colours are CSS-like RGBA strings, e.g. "rgba(102,102,153,0.5)".
    """
    def begin_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def fill(self, colour: str) -> None: ...
    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...
