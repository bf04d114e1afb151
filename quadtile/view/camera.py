"""
Perspective view

Pinhole-camera approximation: a viewer hovering above the tile plane.
"""

import math

from shapely.geometry import Point

from quadtile.core.exceptions import ValidationError
from quadtile.grid.bounds import SpatialBounds


class PerspectiveView:
    """
    Camera at (eye_x, eye_y) hovering `height` units above the tile plane

    Tiles whose nearest point lies within `far` units (horizontally) of the
    eye are visible. A tile's projected resolution is its larger edge scaled
    by the focal length and divided by the slant distance to its nearest
    point, so nearby tiles refine deeper than distant ones.

    All distances are in the same units as the tile bounds.
    """

    def __init__(
        self,
        eye_x: float,
        eye_y: float,
        height: float,
        viewport_px: int = 1024,
        fov_deg: float = 60.0,
        far: float = math.inf,
    ):
        if height <= 0:
            raise ValidationError(f"Camera height must be positive, got {height}")
        if viewport_px <= 0:
            raise ValidationError(f"viewport_px must be positive, got {viewport_px}")
        if not 0.0 < fov_deg < 180.0:
            raise ValidationError(f"fov_deg must be in (0, 180), got {fov_deg}")
        if far < 0:
            raise ValidationError(f"far must be non-negative, got {far}")

        self.eye_x = eye_x
        self.eye_y = eye_y
        self.height = height
        self.viewport_px = viewport_px
        self.fov_deg = fov_deg
        self.far = far
        self.focal_px = viewport_px / (2.0 * math.tan(math.radians(fov_deg) / 2.0))
        self._eye = Point(eye_x, eye_y)

    def ground_distance(self, bounds: SpatialBounds) -> float:
        """Horizontal distance from the eye to the nearest point of `bounds` (0 if inside)"""
        return self._eye.distance(bounds.to_box())

    def intersects(self, bounds: SpatialBounds) -> bool:
        return self.ground_distance(bounds) <= self.far

    def projected_resolution(self, bounds: SpatialBounds) -> float:
        d = self.ground_distance(bounds)
        slant = math.hypot(d, self.height)
        return max(bounds.width, bounds.height) * self.focal_px / slant

    def __repr__(self):
        return (
            f"PerspectiveView(eye=({self.eye_x}, {self.eye_y}), height={self.height}, "
            f"viewport_px={self.viewport_px}, fov_deg={self.fov_deg}, far={self.far})"
        )
