"""2D scale/rotate/translate transform backed by a numpy affine matrix."""

from __future__ import annotations

import math

import numpy as np

from geom2d.point import Point


class Transform:
    """Mutable 2D transform applied as scale, then rotation, then translation."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        rotation: float = 0.0,
    ) -> None:
        self.x = x
        self.y = y
        self.scale_x = scale_x
        self.scale_y = scale_y
        self.rotation = rotation

    def __repr__(self) -> str:
        return (
            f"Transform(x={self.x}, y={self.y}, scale_x={self.scale_x}, "
            f"scale_y={self.scale_y}, rotation={self.rotation})"
        )

    def scale(self, sx: float, sy: float) -> Transform:
        """Set both scale factors and return this transform."""
        self.scale_x = sx
        self.scale_y = sy
        return self

    def translate(self, tx: float, ty: float) -> Transform:
        """Set the translation and return this transform."""
        self.x = tx
        self.y = ty
        return self

    def matrix(self) -> np.ndarray:
        """Return the 3x3 affine matrix for this transform."""
        cos = math.cos(self.rotation)
        sin = math.sin(self.rotation)
        return np.array(
            [
                [cos * self.scale_x, -sin * self.scale_y, self.x],
                [sin * self.scale_x, cos * self.scale_y, self.y],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    def transform_point(self, point: Point) -> Point:
        """Map a point in place through this transform and return it."""
        mapped = self.matrix() @ np.array([point.x, point.y, 1.0], dtype=np.float64)
        return point.set_to(float(mapped[0]), float(mapped[1]))


__all__ = ["Transform"]
