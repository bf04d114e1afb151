"""
Simulate CLI command

Replays one region view per scale against a single tile hierarchy and
prints the delta each view change produces.
"""

import argparse
import logging

import numpy as np

from quadtile.grid.address import decode_many
from quadtile.hierarchy.config import TileSetConfig
from quadtile.hierarchy.tileset import TileHierarchy, describe_update
from quadtile.view.region import RegionView

logger = logging.getLogger(__name__)


def run_simulate(config: TileSetConfig, args: argparse.Namespace) -> None:
    """Run the simulate command"""
    region = tuple(args.bbox) if args.bbox else args.region
    tiles = TileHierarchy.from_config(config)

    for step, scale in enumerate(args.scale, start=1):
        view = RegionView(region, pixels_per_unit=scale)
        update = tiles.update_tile_set(view)

        print(
            f"[{step}] scale={scale:g}  +{len(update.added)} ~{len(update.updated)} "
            f"-{len(update.removed)}  resident={len(tiles.resident)}"
        )
        print(f"    per level: {_level_histogram(tiles.resident)}")

        if args.show_tiles:
            for kind, keys in describe_update(update).items():
                if keys:
                    print(f"    {kind}: {' '.join(keys)}")

    logger.debug("Materialized nodes after simulation: %d", len(tiles))


def _level_histogram(addresses) -> str:
    if not addresses:
        return "(none)"
    levels, _xs, _ys = decode_many(np.asarray(addresses, dtype=np.uint64))
    counts = np.bincount(levels)
    return ", ".join(f"L{lvl}={int(n)}" for lvl, n in enumerate(counts) if n)
