"""
QuadTile Utilities
"""

from quadtile.util.setdiff import SetSplit, split_sets

__all__ = ["SetSplit", "split_sets"]
