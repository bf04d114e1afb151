"""
QuadTile Hierarchy Module

View-driven tile sets and their configuration.
"""

from quadtile.hierarchy.base import TileSet
from quadtile.hierarchy.config import TileSetConfig
from quadtile.hierarchy.tileset import TileHierarchy, describe_update
from quadtile.hierarchy.update import TileSetUpdate

__all__ = [
    "TileSet",
    "TileSetConfig",
    "TileHierarchy",
    "TileSetUpdate",
    "describe_update",
]
