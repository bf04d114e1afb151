"""
Info CLI command

Shows the tile set configuration and the bounds of every root tile.
"""

from quadtile.grid.address import format_address
from quadtile.hierarchy.config import TileSetConfig
from quadtile.hierarchy.tileset import TileHierarchy


def run_info(config: TileSetConfig) -> None:
    """Run the info command"""
    tiles = TileHierarchy.from_config(config)

    minx, miny, maxx, maxy = config.bounds.to_tuple()
    print(f"Bounds: ({minx}, {miny}) - ({maxx}, {maxy})")
    print(f"Levels: {config.min_level} - {config.max_level}")
    print(f"Tile Size: {config.tile_size_px}px")
    print(f"Root Grid: {config.num_root_tiles_x} x {config.num_root_tiles_y}")

    finest_x = config.num_root_tiles_x << config.max_level
    finest_y = config.num_root_tiles_y << config.max_level
    print(f"Finest Level Grid: {finest_x:,} x {finest_y:,}")
    print()

    print("Root Tiles:")
    print("-" * 60)
    for root in tiles.roots:
        b = root.bounds
        print(
            f"  {format_address(root.address):12}  "
            f"lon [{b.min_lon:.6f}, {b.max_lon:.6f}]  lat [{b.min_lat:.6f}, {b.max_lat:.6f}]"
        )
