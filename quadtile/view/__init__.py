"""
QuadTile View Module

Viewpoint snapshots consulted by the tile hierarchy.
"""

from quadtile.view.base import TileView
from quadtile.view.camera import PerspectiveView
from quadtile.view.region import RegionView

__all__ = [
    "TileView",
    "RegionView",
    "PerspectiveView",
]
