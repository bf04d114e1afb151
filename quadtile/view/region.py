"""
Region view

Orthographic view described by a footprint geometry and a fixed scale.

Supports:
- Shapely geometries
- GeoJSON dicts (geometry, Feature, FeatureCollection)
- Paths to GeoJSON files
"""

import json
from pathlib import Path
from typing import Union

from shapely.geometry import box, shape
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.prepared import prep

from quadtile.core.exceptions import ValidationError
from quadtile.grid.bounds import SpatialBounds


class RegionView:
    """
    Orthographic view over a visible region

    A tile is visible when its interior overlaps the region; tiles that only
    share an edge or corner with the region are not. Every tile projects at
    `pixels_per_unit` screen pixels per unit of lon/lat.

    Examples:
        >>> view = RegionView((126.9, 37.5, 127.1, 37.6), pixels_per_unit=5000)
        >>> view.intersects(SpatialBounds(126.0, 128.0, 37.0, 38.0))
        True
        >>> view.projected_resolution(SpatialBounds(126.0, 128.0, 37.0, 38.0))
        10000.0
    """

    def __init__(
        self,
        region: Union[dict, BaseGeometry, str, Path, tuple],
        pixels_per_unit: float,
    ):
        """
        Args:
            region: Shapely geometry, GeoJSON dict, path to a GeoJSON file,
                or a (minx, miny, maxx, maxy) tuple
            pixels_per_unit: Screen pixels per unit of lon/lat
        """
        if pixels_per_unit <= 0:
            raise ValidationError(f"pixels_per_unit must be positive, got {pixels_per_unit}")

        self.region = _parse_region(region)
        self.pixels_per_unit = float(pixels_per_unit)
        self._prepared = None if self.region.is_empty else prep(self.region)

    def intersects(self, bounds: SpatialBounds) -> bool:
        if self._prepared is None:
            return False
        tile = bounds.to_box()
        return self._prepared.intersects(tile) and not self._prepared.touches(tile)

    def projected_resolution(self, bounds: SpatialBounds) -> float:
        return max(bounds.width, bounds.height) * self.pixels_per_unit

    def __repr__(self):
        return f"RegionView(bounds={self.region.bounds}, pixels_per_unit={self.pixels_per_unit})"


def _parse_region(region: Union[dict, BaseGeometry, str, Path, tuple]) -> BaseGeometry:
    """
    Parse a region from various input formats

    Returns:
        Shapely geometry object
    """
    # Already a Shapely geometry
    if isinstance(region, BaseGeometry):
        return region

    # Bounding box tuple
    if isinstance(region, tuple):
        if len(region) != 4:
            raise ValidationError(f"Bounding box must have 4 values, got {len(region)}")
        return box(*region)

    # Path to GeoJSON file
    if isinstance(region, (str, Path)):
        path = Path(region)
        if not path.exists():
            raise FileNotFoundError(f"GeoJSON file not found: {region}")
        with open(path) as f:
            return _geojson_to_geometry(json.load(f))

    # GeoJSON dict
    if isinstance(region, dict):
        return _geojson_to_geometry(region)

    raise TypeError(f"Unsupported region type: {type(region)}")


def _geojson_to_geometry(geojson: dict) -> BaseGeometry:
    """
    Convert GeoJSON dict to Shapely geometry

    Handles both Feature and raw geometry types.
    """
    if geojson.get("type") == "FeatureCollection":
        features = geojson.get("features", [])
        if not features:
            raise ValidationError("Empty FeatureCollection")
        return unary_union([shape(f["geometry"]) for f in features])

    if geojson.get("type") == "Feature":
        return shape(geojson["geometry"])

    return shape(geojson)
