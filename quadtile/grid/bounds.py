"""
Spatial Bounds

Axis-aligned lon/lat rectangle with exact quadtree subdivision.
"""

from dataclasses import dataclass
from typing import Tuple

from shapely.geometry import Polygon, box

from quadtile.core.exceptions import ValidationError


@dataclass(frozen=True)
class SpatialBounds:
    """
    Axis-aligned rectangle covering one tile (or the whole tile set)

    x (longitude) grows eastward, y (latitude) grows northward. Subdivision
    always splits on the shared midpoint so sibling tiles meet on exactly the
    same floating-point edge.

    Examples:
        >>> world = SpatialBounds(-180.0, 180.0, -90.0, 90.0)
        >>> world.quarter(0, 0)
        SpatialBounds(min_lon=-180.0, max_lon=0.0, min_lat=-90.0, max_lat=0.0)
        >>> world.to_tuple()
        (-180.0, -90.0, 180.0, 90.0)
    """

    min_lon: float
    max_lon: float
    min_lat: float
    max_lat: float

    def __post_init__(self):
        if not self.min_lon < self.max_lon:
            raise ValidationError(
                f"min_lon must be < max_lon, got {self.min_lon} >= {self.max_lon}"
            )
        if not self.min_lat < self.max_lat:
            raise ValidationError(
                f"min_lat must be < max_lat, got {self.min_lat} >= {self.max_lat}"
            )

    @property
    def width(self) -> float:
        return self.max_lon - self.min_lon

    @property
    def height(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def center(self) -> Tuple[float, float]:
        return (
            self.min_lon + self.width * 0.5,
            self.min_lat + self.height * 0.5,
        )

    def quarter(self, quadrant_x: int, quadrant_y: int) -> "SpatialBounds":
        """
        Bounds of one quadrant

        Args:
            quadrant_x: 0 for the western half, 1 for the eastern half
            quadrant_y: 0 for the southern half, 1 for the northern half

        Returns:
            Child bounds; the four quadrants tile this rectangle exactly
        """
        if quadrant_x not in (0, 1) or quadrant_y not in (0, 1):
            raise ValueError(
                f"Quadrant must be 0 or 1 on each axis, got ({quadrant_x}, {quadrant_y})"
            )
        mid_lon, mid_lat = self.center
        lons = (self.min_lon, mid_lon, self.max_lon)
        lats = (self.min_lat, mid_lat, self.max_lat)
        return SpatialBounds(
            lons[quadrant_x],
            lons[quadrant_x + 1],
            lats[quadrant_y],
            lats[quadrant_y + 1],
        )

    def grid_cell(self, num_x: int, num_y: int, x: int, y: int) -> "SpatialBounds":
        """
        Bounds of cell (x, y) when this rectangle is split into num_x by num_y cells

        The last cell on each axis reuses this rectangle's max edge verbatim.
        """
        if num_x < 1 or num_y < 1:
            raise ValueError(f"Grid must be at least 1x1, got {num_x}x{num_y}")
        if not (0 <= x < num_x and 0 <= y < num_y):
            raise ValueError(f"Cell ({x}, {y}) outside {num_x}x{num_y} grid")

        def edge(lo: float, hi: float, i: int, n: int) -> float:
            if i == n:
                return hi
            return lo + (hi - lo) * i / n

        return SpatialBounds(
            edge(self.min_lon, self.max_lon, x, num_x),
            edge(self.min_lon, self.max_lon, x + 1, num_x),
            edge(self.min_lat, self.max_lat, y, num_y),
            edge(self.min_lat, self.max_lat, y + 1, num_y),
        )

    def intersects(self, other: "SpatialBounds") -> bool:
        """True if the interiors overlap (shared edges do not count)"""
        return (
            self.min_lon < other.max_lon
            and other.min_lon < self.max_lon
            and self.min_lat < other.max_lat
            and other.min_lat < self.max_lat
        )

    def contains_point(self, lon: float, lat: float) -> bool:
        return self.min_lon <= lon <= self.max_lon and self.min_lat <= lat <= self.max_lat

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Bounds as (minx, miny, maxx, maxy)"""
        return (self.min_lon, self.min_lat, self.max_lon, self.max_lat)

    @classmethod
    def from_tuple(cls, bounds: Tuple[float, float, float, float]) -> "SpatialBounds":
        """Build from (minx, miny, maxx, maxy), the order shapely uses"""
        minx, miny, maxx, maxy = bounds
        return cls(float(minx), float(maxx), float(miny), float(maxy))

    def to_box(self) -> Polygon:
        """Shapely polygon of this rectangle"""
        return box(*self.to_tuple())
