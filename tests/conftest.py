"""
QuadTile Test Configuration

Shared pytest fixtures for all tests.
"""

import pytest

from quadtile.grid.bounds import SpatialBounds
from quadtile.hierarchy.tileset import TileHierarchy


@pytest.fixture
def world_bounds():
    """Whole-world lon/lat extent"""
    return SpatialBounds(-180.0, 180.0, -90.0, 90.0)


@pytest.fixture
def two_root_hierarchy(world_bounds):
    """Levels 0-2 over a 2x1 root grid (western and eastern hemispheres)"""
    return TileHierarchy(
        world_bounds,
        min_level=0,
        max_level=2,
        num_root_tiles_x=2,
        num_root_tiles_y=1,
    )


@pytest.fixture
def south_west_region():
    """Small box inside tile 2/0/0 (lon -180..-135, lat -90..-45)"""
    return (-170.0, -80.0, -160.0, -70.0)
