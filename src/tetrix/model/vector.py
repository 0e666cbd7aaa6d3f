"""
Vector with a rotation pivot.

A vertex of the fractal carries its own rotation centre, so that every
leaf pyramid can be turned about the scene's single pivot instead of its
own centroid.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def as_point(values: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Copy any (x, y, z) sequence into a float64 array."""
    return np.array(values, dtype=np.float64)


def rotate_points(
    points: npt.NDArray[np.float64],
    centres: npt.NDArray[np.float64],
    rotation: Sequence[float] | npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    """
    Rotate one point (shape (3,)) or a stack of points (shape (n, 3)) about
    their centres.

    Three planar rotations are applied one after another: the X angle
    turns the (y, z) pair, then the Y angle turns the (z, x) pair, then
    the Z angle turns the (x, y) pair. The order is part of the result.

    Args:
        points: Coordinates to rotate. Not modified.
        centres: Rotation centre, one per point or one for all.
        rotation: Angles (theta_x, theta_y, theta_z) in radians.

    Returns:
        The rotated coordinates, same shape as `points`.
    """
    p = np.array(points, dtype=np.float64)
    c = np.broadcast_to(np.asarray(centres, dtype=np.float64), p.shape)
    for axis, theta in enumerate(rotation):
        if theta == 0.0:
            continue
        i = (axis + 1) % 3
        j = (axis + 2) % 3
        sin_t = math.sin(theta)
        cos_t = math.cos(theta)
        a = p[..., i] - c[..., i]
        b = p[..., j] - c[..., j]
        p[..., i] = c[..., i] + a * cos_t - b * sin_t
        p[..., j] = c[..., j] + a * sin_t + b * cos_t
    return p


@dataclass
class Vector:
    """
    A point in 3D space tied to a rotation centre.
    """
    position: npt.NDArray[np.float64]
    rotation_centre: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        self.position = as_point(self.position)
        self.rotation_centre = as_point(self.rotation_centre)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def z(self) -> float:
        return float(self.position[2])

    def move_centre_to(self, new_centre: Sequence[float] | npt.NDArray[np.float64]) -> Vector:
        """Re-pin the rotation centre. The position itself does not move."""
        self.rotation_centre = as_point(new_centre)
        return self

    def rotate(self, rotation: Sequence[float] | npt.NDArray[np.float64]) -> Vector:
        """Rotate in place about the current rotation centre. See `rotate_points`."""
        self.position = rotate_points(self.position, self.rotation_centre, rotation)
        return self

    def to_array(self) -> npt.NDArray[np.float64]:
        return self.position.copy()
