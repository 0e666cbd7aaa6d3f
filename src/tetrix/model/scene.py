"""
Scene composition: one camera in mono mode, two in stereo.

Each camera owns a Tree and a fixed horizontal offset from the viewport
centre. Stereo cameras also start with opposite Y rotations (parallax).
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tetrix.config import Mode
from tetrix.model.tree import Tree

if TYPE_CHECKING:
    from tetrix.config import TetrixConfig, Viewport
    from tetrix.model.surface import DrawingSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScrollDelta:
    """One wheel event, in scroll units."""
    delta_x: float
    delta_y: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.delta_x) and math.isfinite(self.delta_y)


@dataclass
class Camera:
    """A Tree drawn at a fixed horizontal offset."""
    tree: Tree
    offset_x: float = 0.0


class Scene:
    """
    Host-level composer. Forwards every scroll delta to all cameras.
    """
    def __init__(self, config: TetrixConfig, viewport: Viewport, cameras: list[Camera]) -> None:
        self.config = config
        self.viewport = viewport
        self.cameras = cameras

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mode={self.config.mode}, cameras={len(self.cameras)})"

    @classmethod
    def from_config(cls, config: TetrixConfig, viewport: Viewport) -> Scene:
        """Build the cameras required by `config.mode`."""
        def camera(colour: str, offset_x: float = 0.0, parallax: float = 0.0) -> Camera:
            tree = Tree(colour=colour, min_side=config.min_side, initial_rotation=(0.0, parallax, 0.0))
            return Camera(tree, offset_x=offset_x)

        if config.mode is Mode.MONO:
            cameras = [camera(config.colour)]
        elif config.mode is Mode.REAL_3D:
            half = config.camera_separation / 2
            cameras = [
                camera(config.colour, offset_x=-half, parallax=+config.parallax),
                camera(config.colour, offset_x=+half, parallax=-config.parallax),
            ]
        elif config.mode is Mode.ANAGLYPH:
            left, right = config.anaglyph_colours
            cameras = [
                camera(left, parallax=+config.parallax),
                camera(right, parallax=-config.parallax),
            ]
        else:
            raise ValueError(f"Unknown mode: {config.mode!r}")

        logger.info(
            f"Scene created: mode={config.mode}, side={config.side}, min_side={config.min_side}, "
            f"cameras={len(cameras)}, viewport={viewport.width}x{viewport.height}@{viewport.scale}"
        )
        return cls(config, viewport, cameras)

    @property
    def trees(self) -> list[Tree]:
        return [camera.tree for camera in self.cameras]

    def camera_centre(self, camera: Camera) -> tuple[float, float, float]:
        cx, cy, cz = self.viewport.centre
        return cx + camera.offset_x, cy, cz

    def rotation_delta(self, delta: ScrollDelta) -> tuple[float, float, float]:
        """Vertical scroll turns about X, horizontal scroll about Y."""
        k = self.config.rotation_per_scroll_unit
        return k * delta.delta_y, k * delta.delta_x, 0.0

    def clear(self, surface: DrawingSurface) -> None:
        surface.clear_rect(0.0, 0.0, self.viewport.width, self.viewport.height)

    def draw(self, surface: DrawingSurface, delta_rotation: tuple[float, float, float]) -> int:
        """Clear, then redraw every camera with the same rotation delta."""
        self.clear(surface)
        return sum(
            camera.tree.draw(surface, self.config.side, self.camera_centre(camera), delta_rotation)
            for camera in self.cameras
        )

    def render(self, surface: DrawingSurface) -> int:
        """Redraw at the current orientation."""
        return self.draw(surface, (0.0, 0.0, 0.0))

    def scroll(self, surface: DrawingSurface, delta_x: float, delta_y: float) -> int:
        """
        Apply one wheel event and redraw.

        Non-finite deltas are dropped so they cannot poison the accumulated
        rotation.

        Returns:
            Total number of leaf pyramids drawn, 0 if the event was dropped.
        """
        delta = ScrollDelta(delta_x, delta_y)
        if not delta.is_finite:
            logger.warning(f"Ignoring non-finite scroll delta: {delta}")
            return 0
        return self.draw(surface, self.rotation_delta(delta))
