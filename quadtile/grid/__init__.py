"""
QuadTile Grid Module

Tile addressing, bounds and quadtree nodes.
"""

from quadtile.grid.address import (
    TileAddress,
    child_address,
    decode,
    decode_many,
    encode,
    encode_many,
    format_address,
    parent_address,
    parse_address,
)
from quadtile.grid.bounds import SpatialBounds
from quadtile.grid.node import (
    CLIP_ALL,
    CLIP_NONE,
    RESOLUTION_UNSET,
    Quadrant,
    TileNode,
    compare_by_level,
    level_order_key,
)

__all__ = [
    "TileAddress",
    "encode",
    "decode",
    "encode_many",
    "decode_many",
    "child_address",
    "parent_address",
    "format_address",
    "parse_address",
    "SpatialBounds",
    "Quadrant",
    "TileNode",
    "CLIP_ALL",
    "CLIP_NONE",
    "RESOLUTION_UNSET",
    "compare_by_level",
    "level_order_key",
]
