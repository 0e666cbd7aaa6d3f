"""
Regular tetrahedron geometry.
"""
from __future__ import annotations

from math import sqrt
from typing import TYPE_CHECKING, Sequence

import numpy as np

from tetrix.model.vector import Vector, as_point, rotate_points

if TYPE_CHECKING:
    import numpy.typing as npt
    from tetrix.model.surface import DrawingSurface

# Vertex offsets from the centroid, in units of the side length
L1 = sqrt(1 / 24)
L2 = sqrt(3 / 8)
L3 = sqrt(1 / 12)
L4 = sqrt(1 / 3)

_UNIT_OFFSETS = np.array([
    [-0.5, -L1, -L3],
    [+0.5, -L1, -L3],
    [0.0, -L1, +L4],
    [0.0, +L2, 0.0],
])


class Pyramid:
    """
    A regular tetrahedron of a given side, centred on a point.

    The four vertices share the centre as their rotation pivot until
    `move_centre_to` re-pins them.
    """
    def __init__(self, side: float, centre: Sequence[float] | npt.NDArray[np.float64]) -> None:
        centre = as_point(centre)
        self.side = side
        self.vectors: list[Vector] = [
            Vector(position=centre + side * offset, rotation_centre=centre)
            for offset in _UNIT_OFFSETS
        ]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(side={self.side}, vertices={self.vertices().tolist()})"

    def vertices(self) -> npt.NDArray[np.float64]:
        """(4, 3) array with the current vertex coordinates."""
        return np.array([v.position for v in self.vectors])

    def centres(self) -> list[npt.NDArray[np.float64]]:
        """Vertex positions, used as the centres of the four sub-pyramids."""
        return [v.to_array() for v in self.vectors]

    def move_centre_to(self, new_centre: Sequence[float] | npt.NDArray[np.float64]) -> Pyramid:
        for v in self.vectors:
            v.move_centre_to(new_centre)
        return self

    def rotate(self, rotation: Sequence[float] | npt.NDArray[np.float64]) -> Pyramid:
        """Rotate all four vertices at once, each about its own rotation centre."""
        centres = np.array([v.rotation_centre for v in self.vectors])
        rotated = rotate_points(self.vertices(), centres, rotation)
        for v, position in zip(self.vectors, rotated):
            v.position = position
        return self

    def rasterize(self, surface: DrawingSurface, colour: str) -> Pyramid:
        """
        Fill the four faces as flat triangles, dropping Z.

        Face i is spanned by vertices i, i+1 and i+2 (mod 4).
        """
        vs = self.vectors
        for i, v in enumerate(vs):
            a = vs[(i + 1) % 4]
            b = vs[(i + 2) % 4]
            surface.begin_path()
            surface.move_to(v.x, v.y)
            surface.line_to(a.x, a.y)
            surface.line_to(b.x, b.y)
            surface.line_to(v.x, v.y)
            surface.fill(colour)
        return self
