"""
QuadTile - Quadtree tile residency for multi-resolution geospatial data

Decides which tiles of an imagery/elevation pyramid should be resident for a
viewpoint and reports the minimal add/update/remove delta on every view
change. Tile content loading and rendering are left to the caller.

Quick Start:
    >>> import quadtile as qt
    >>>
    >>> tiles = qt.TileHierarchy(
    ...     qt.SpatialBounds(-180.0, 180.0, -90.0, 90.0),
    ...     max_level=12,
    ...     num_root_tiles_x=2,
    ... )
    >>>
    >>> view = qt.RegionView((126.9, 37.5, 127.1, 37.6), pixels_per_unit=20000)
    >>> update = tiles.update_tile_set(view)
    >>> for address in update.added:
    ...     node = tiles.get_tile(address)
    ...     print(qt.format_address(address), node.bounds.to_tuple())
"""

from quadtile.core import (
    AddressNotFoundError,
    InvalidCoordinateError,
    PreconditionViolatedError,
    QuadTileError,
    ValidationError,
)
from quadtile.grid import (
    Quadrant,
    SpatialBounds,
    TileAddress,
    TileNode,
    decode,
    encode,
    format_address,
    parse_address,
)
from quadtile.hierarchy import TileHierarchy, TileSet, TileSetConfig, TileSetUpdate
from quadtile.util import SetSplit, split_sets
from quadtile.view import PerspectiveView, RegionView, TileView

__version__ = "0.1.0"

__all__ = [
    # Addressing
    "TileAddress",
    "encode",
    "decode",
    "format_address",
    "parse_address",
    # Geometry
    "SpatialBounds",
    "Quadrant",
    "TileNode",
    # Hierarchy
    "TileSet",
    "TileSetConfig",
    "TileHierarchy",
    "TileSetUpdate",
    # Set diff
    "SetSplit",
    "split_sets",
    # Views
    "TileView",
    "RegionView",
    "PerspectiveView",
    # Exceptions
    "QuadTileError",
    "InvalidCoordinateError",
    "AddressNotFoundError",
    "PreconditionViolatedError",
    "ValidationError",
    "__version__",
]
