"""
Tile Set Protocol

Contract between a tile hierarchy and the renderer/cache that consumes it.
"""

from typing import Optional, Protocol, runtime_checkable

from quadtile.grid.address import TileAddress
from quadtile.grid.bounds import SpatialBounds
from quadtile.grid.node import TileNode
from quadtile.hierarchy.update import TileSetUpdate
from quadtile.view.base import TileView


@runtime_checkable
class TileSet(Protocol):
    """
    View-driven set of resident tiles

    A tile set decides which tiles of a multi-resolution dataset should be
    resident for a viewpoint and reports only what changed since the last
    call. It never loads or renders tile content.
    """

    @property
    def bounds(self) -> SpatialBounds: ...

    @property
    def min_level(self) -> int: ...

    @property
    def max_level(self) -> int: ...

    @property
    def num_root_tiles_x(self) -> int: ...

    @property
    def num_root_tiles_y(self) -> int: ...

    def get_tile(self, address: TileAddress) -> Optional[TileNode]:
        """
        Look up a materialized tile

        Args:
            address: Packed tile address

        Returns:
            The node, or None if no node exists for that address
        """
        ...

    def update_tile_set(self, view: TileView) -> TileSetUpdate:
        """
        Recompute the resident set for a view

        Args:
            view: Viewpoint snapshot

        Returns:
            Addresses to add, update and remove, each sorted ascending
        """
        ...
