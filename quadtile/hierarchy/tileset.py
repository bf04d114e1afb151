"""
Tile Hierarchy

Quadtree-backed tile set that turns view changes into add/update/remove
deltas.

On every update the hierarchy:
1. Walks the quadtree from the root grid, refining visible tiles whose
   projected size exceeds their native pixel size (bounded by min/max level)
2. Materializes child nodes lazily along the way
3. Diffs the previously resident addresses against the newly required ones
   with a single sorted merge pass
4. Releases every subtree the new view no longer reaches
"""

import logging
import math
from typing import Dict, List, Optional, Set, Tuple

from quadtile.core.exceptions import AddressNotFoundError
from quadtile.grid.address import TileAddress, format_address
from quadtile.grid.bounds import SpatialBounds
from quadtile.grid.node import (
    CLIP_NONE,
    RESOLUTION_UNSET,
    Quadrant,
    TileNode,
    level_order_key,
)
from quadtile.hierarchy.config import DEFAULT_TILE_SIZE_PX, TileSetConfig
from quadtile.hierarchy.update import TileSetUpdate
from quadtile.util.setdiff import split_sets
from quadtile.view.base import TileView

logger = logging.getLogger(__name__)


class TileHierarchy:
    """
    View-driven quadtree tile set

    Root tiles are created once, one per cell of the
    num_root_tiles_x by num_root_tiles_y grid over `bounds`. Everything below
    the roots is created on demand and released when no longer in view.

    The resident set after an update is every visible tile the refinement
    reached within [min_level, max_level], interior tiles included, so a
    renderer can fall back to a coarser ancestor while finer content loads.

    Not thread-safe: callers must serialize update_tile_set()/get_tile() on
    one instance.

    Examples:
        >>> from quadtile.view import RegionView
        >>> tiles = TileHierarchy(
        ...     SpatialBounds(-180.0, 180.0, -90.0, 90.0),
        ...     min_level=0,
        ...     max_level=2,
        ...     num_root_tiles_x=2,
        ... )
        >>> update = tiles.update_tile_set(RegionView((-170, -80, -160, -70), 100.0))
        >>> [format_address(a) for a in update.added]
        ['0/0/0', '1/0/0', '2/0/0']
    """

    def __init__(
        self,
        bounds: SpatialBounds,
        min_level: int = 0,
        max_level: int = 0,
        num_root_tiles_x: int = 1,
        num_root_tiles_y: int = 1,
        tile_size_px: int = DEFAULT_TILE_SIZE_PX,
        check_invariants: bool = False,
    ):
        """
        Args:
            bounds: Global extent covered by the root grid
            min_level: Coarsest level reported as resident
            max_level: Finest level refined to
            num_root_tiles_x: Root grid columns
            num_root_tiles_y: Root grid rows
            tile_size_px: Native pixel size of one tile
            check_invariants: Verify sortedness before every set diff

        Raises:
            ValidationError: If the configuration is invalid
        """
        self.config = TileSetConfig(
            bounds=bounds,
            min_level=min_level,
            max_level=max_level,
            num_root_tiles_x=num_root_tiles_x,
            num_root_tiles_y=num_root_tiles_y,
            tile_size_px=tile_size_px,
            check_invariants=check_invariants,
        )

        self._roots: List[TileNode] = []
        self._index: Dict[int, TileNode] = {}
        for y in range(num_root_tiles_y):
            for x in range(num_root_tiles_x):
                cell = bounds.grid_cell(num_root_tiles_x, num_root_tiles_y, x, y)
                root = TileNode.root(cell, x, y)
                self._roots.append(root)
                self._index[root.address] = root

        self._root_addresses = frozenset(self._index)
        self._visited: Set[int] = set(self._root_addresses)
        self._resident: List[TileAddress] = []
        self._emitted: Dict[int, Tuple[int, int]] = {}

        logger.info(
            "Created tile hierarchy: %dx%d root tiles, levels %d-%d, tile size %dpx",
            num_root_tiles_x,
            num_root_tiles_y,
            min_level,
            max_level,
            tile_size_px,
        )

    @classmethod
    def from_config(cls, config: TileSetConfig) -> "TileHierarchy":
        return cls(
            bounds=config.bounds,
            min_level=config.min_level,
            max_level=config.max_level,
            num_root_tiles_x=config.num_root_tiles_x,
            num_root_tiles_y=config.num_root_tiles_y,
            tile_size_px=config.tile_size_px,
            check_invariants=config.check_invariants,
        )

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def bounds(self) -> SpatialBounds:
        return self.config.bounds

    @property
    def min_level(self) -> int:
        return self.config.min_level

    @property
    def max_level(self) -> int:
        return self.config.max_level

    @property
    def num_root_tiles_x(self) -> int:
        return self.config.num_root_tiles_x

    @property
    def num_root_tiles_y(self) -> int:
        return self.config.num_root_tiles_y

    @property
    def tile_size_px(self) -> int:
        return self.config.tile_size_px

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    @property
    def roots(self) -> Tuple[TileNode, ...]:
        """Root tiles, row by row from the south-west corner"""
        return tuple(self._roots)

    def root(self, x: int, y: int) -> TileNode:
        """Root tile at position (x, y) of the root grid"""
        if not (0 <= x < self.num_root_tiles_x and 0 <= y < self.num_root_tiles_y):
            raise IndexError(
                f"Root ({x}, {y}) outside {self.num_root_tiles_x}x{self.num_root_tiles_y} grid"
            )
        return self._roots[y * self.num_root_tiles_x + x]

    @property
    def resident(self) -> Tuple[TileAddress, ...]:
        """Addresses resident as of the last update, sorted ascending"""
        return tuple(self._resident)

    def resident_nodes(self) -> List[TileNode]:
        """Resident tiles ordered coarse to fine"""
        return sorted((self._index[a] for a in self._resident), key=level_order_key)

    def get_tile(self, address: TileAddress) -> Optional[TileNode]:
        """
        Look up a materialized tile

        Returns None for any address without a node, including valid
        addresses the current view never needed.
        """
        return self._index.get(address)

    def __getitem__(self, address: TileAddress) -> TileNode:
        node = self._index.get(address)
        if node is None:
            raise AddressNotFoundError(f"No materialized tile for address {address}")
        return node

    def __contains__(self, address: object) -> bool:
        return address in self._index

    def __len__(self) -> int:
        """Number of materialized nodes"""
        return len(self._index)

    # -------------------------------------------------------------------------
    # View update
    # -------------------------------------------------------------------------

    def update_tile_set(self, view: TileView) -> TileSetUpdate:
        """
        Recompute the resident set for a view and return the delta

        Args:
            view: Viewpoint snapshot answering intersects()/projected_resolution()

        Returns:
            TileSetUpdate with sorted added/updated/removed addresses. A view
            that needs no tiles removes everything previously resident.

        If the view raises, tiles created during this call are released,
        the resident set and tile metadata are restored and the error is
        re-raised.
        """
        visited: Set[int] = set(self._root_addresses)
        required: Dict[int, TileNode] = {}

        try:
            for root in self._roots:
                if view.intersects(root.bounds):
                    self._refine(root, view, visited, required)
                else:
                    root.clip_mask = CLIP_NONE
                    root.resolution_hint = RESOLUTION_UNSET
        except Exception:
            self._rollback()
            raise

        required_sorted = sorted(required)
        split = split_sets(
            self._resident,
            required_sorted,
            check_sorted=self.config.check_invariants,
        )

        updated = []
        for address in split.both:
            node = required[address]
            if self._emitted[address] != (node.clip_mask, node.resolution_hint):
                updated.append(address)

        pruned = self._prune(visited)

        self._resident = [TileAddress(a) for a in required_sorted]
        self._emitted = {a: (n.clip_mask, n.resolution_hint) for a, n in required.items()}
        self._visited = visited

        update = TileSetUpdate(
            added=[TileAddress(a) for a in split.only_b],
            updated=updated,
            removed=[TileAddress(a) for a in split.only_a],
        )
        logger.debug(
            "Tile set update: +%d ~%d -%d (resident %d, materialized %d, pruned %d)",
            len(update.added),
            len(update.updated),
            len(update.removed),
            len(self._resident),
            len(self._index),
            pruned,
        )
        return update

    def _refine(
        self,
        node: TileNode,
        view: TileView,
        visited: Set[int],
        required: Dict[int, TileNode],
    ) -> None:
        """Record a visible node and recurse into its visible quadrants if needed"""
        visited.add(node.address)

        projected = view.projected_resolution(node.bounds)
        clip = CLIP_NONE
        visible: List[Quadrant] = []
        for quadrant in Quadrant:
            qx, qy = quadrant.offset
            if view.intersects(node.bounds.quarter(qx, qy)):
                visible.append(quadrant)
            else:
                clip |= quadrant.clip_bit

        node.clip_mask = clip
        node.resolution_hint = self._resolution_hint(projected)

        if node.level >= self.min_level:
            required[node.address] = node
            if projected <= self.tile_size_px:
                return
        if node.level >= self.max_level:
            return

        for quadrant in visible:
            child = node.child(quadrant)
            if child is None:
                child = node.get_or_create_child(quadrant)
                self._index[child.address] = child
            self._refine(child, view, visited, required)

    def _resolution_hint(self, projected: float) -> int:
        """Power-of-two texture size for a tile, capped at the native tile size"""
        if not math.isfinite(projected):
            return self.tile_size_px
        if projected <= 1.0:
            return 1
        size = 1 << (math.ceil(projected) - 1).bit_length()
        return min(self.tile_size_px, size)

    def _prune(self, keep: Set[int]) -> int:
        """Release every materialized subtree whose top node is not in `keep`"""
        pruned = 0
        stack = list(self._roots)
        while stack:
            node = stack.pop()
            for quadrant in Quadrant:
                child = node.child(quadrant)
                if child is None:
                    continue
                if child.address in keep:
                    stack.append(child)
                    continue
                for descendant in child.iter_subtree():
                    del self._index[descendant.address]
                    pruned += 1
                node.detach_child(quadrant)
        return pruned

    def _rollback(self) -> None:
        pruned = self._prune(self._visited)
        for address, (clip, hint) in self._emitted.items():
            node = self._index[address]
            node.clip_mask = clip
            node.resolution_hint = hint
        logger.debug("Tile set update failed, released %d new tiles", pruned)

    def __repr__(self):
        return (
            f"TileHierarchy(roots={self.num_root_tiles_x}x{self.num_root_tiles_y}, "
            f"levels={self.min_level}-{self.max_level}, resident={len(self._resident)}, "
            f"materialized={len(self._index)})"
        )


def describe_update(update: TileSetUpdate) -> Dict[str, List[str]]:
    """Human-readable "level/x/y" keys for each list of an update"""
    return {
        "added": [format_address(a) for a in update.added],
        "updated": [format_address(a) for a in update.updated],
        "removed": [format_address(a) for a in update.removed],
    }
