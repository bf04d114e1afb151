"""
QuadTile CLI Entry Points

Provides command-line interface for:
- info: Show tile set configuration and root grid
- simulate: Replay a series of region views and print each delta
"""

import argparse
import logging
import sys

from quadtile.core.exceptions import ValidationError
from quadtile.grid.bounds import SpatialBounds
from quadtile.hierarchy.config import DEFAULT_TILE_SIZE_PX, TileSetConfig


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="QuadTile - Quadtree tile residency planner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  quadtile info --max-level 12 --roots-x 2
  quadtile info --config tileset.json
  quadtile simulate --max-level 8 --bbox 126.9 37.5 127.1 37.6 --scale 10 100 1000
  quadtile simulate --config tileset.json --region area.geojson --scale 50 5 --show-tiles
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Info command
    info_parser = subparsers.add_parser("info", help="Show tile set configuration")
    _add_config_arguments(info_parser)

    # Simulate command
    simulate_parser = subparsers.add_parser(
        "simulate", help="Replay region views and print add/update/remove deltas"
    )
    _add_config_arguments(simulate_parser)
    region_group = simulate_parser.add_mutually_exclusive_group(required=True)
    region_group.add_argument(
        "--bbox",
        type=float,
        nargs=4,
        metavar=("MINX", "MINY", "MAXX", "MAXY"),
        help="Visible region as a bounding box",
    )
    region_group.add_argument("--region", help="Visible region as a GeoJSON file")
    simulate_parser.add_argument(
        "--scale",
        type=float,
        nargs="+",
        required=True,
        help="Screen pixels per unit, one view per value",
    )
    simulate_parser.add_argument(
        "--show-tiles", action="store_true", help="List tile keys of every delta"
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(message)s" if not args.verbose else "%(levelname)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args)

        if args.command == "info":
            from quadtile.cli.info import run_info

            run_info(config)
        elif args.command == "simulate":
            from quadtile.cli.simulate import run_simulate

            run_simulate(config, args)
    except (ValidationError, FileNotFoundError) as e:
        print(f"Error: {e}")
        sys.exit(2)


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Tile set configuration (JSON)")
    parser.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        metavar=("MINX", "MINY", "MAXX", "MAXY"),
        default=(-180.0, -90.0, 180.0, 90.0),
        help="Global extent (default: whole world)",
    )
    parser.add_argument("--min-level", type=int, default=0, help="Coarsest resident level")
    parser.add_argument("--max-level", type=int, default=0, help="Finest level")
    parser.add_argument("--roots-x", type=int, default=1, help="Root grid columns")
    parser.add_argument("--roots-y", type=int, default=1, help="Root grid rows")
    parser.add_argument(
        "--tile-size",
        type=int,
        default=DEFAULT_TILE_SIZE_PX,
        help=f"Native tile size in pixels (default: {DEFAULT_TILE_SIZE_PX})",
    )


def load_config(args: argparse.Namespace) -> TileSetConfig:
    """Build a TileSetConfig from --config or the individual options"""
    if args.config:
        return TileSetConfig.from_json(args.config)

    return TileSetConfig(
        bounds=SpatialBounds.from_tuple(tuple(args.bounds)),
        min_level=args.min_level,
        max_level=args.max_level,
        num_root_tiles_x=args.roots_x,
        num_root_tiles_y=args.roots_y,
        tile_size_px=args.tile_size,
    )


if __name__ == "__main__":
    main()
