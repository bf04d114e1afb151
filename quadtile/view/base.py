"""
Tile View Protocol

The only thing the tile hierarchy needs to know about a camera.
"""

from typing import Protocol, runtime_checkable

from quadtile.grid.bounds import SpatialBounds


@runtime_checkable
class TileView(Protocol):
    """
    Read-only snapshot of a viewpoint

    The hierarchy asks two questions per candidate tile and never touches
    the camera, renderer or projection behind them. Implementations must be
    deterministic: the same bounds always yield the same answers for the
    lifetime of the snapshot.
    """

    def intersects(self, bounds: SpatialBounds) -> bool:
        """
        Whether a tile footprint is (at least partly) visible

        Args:
            bounds: Tile footprint

        Returns:
            True if any part of the interior of `bounds` is in view
        """
        ...

    def projected_resolution(self, bounds: SpatialBounds) -> float:
        """
        Screen-space size of a tile footprint

        Args:
            bounds: Tile footprint

        Returns:
            Approximate number of screen pixels spanned by the larger edge
            of `bounds` at this viewpoint
        """
        ...
