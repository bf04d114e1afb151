"""
Tile set update result

Container for the add/update/remove delta of one view change.
"""

from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np
from numpy.typing import NDArray

from quadtile.grid.address import TileAddress


@dataclass
class TileSetUpdate:
    """
    Delta between two resident sets

    Attributes:
        added: Newly resident tiles
        updated: Tiles that stayed resident but whose clip mask or
            resolution hint changed
        removed: Tiles no longer resident

    All three lists are sorted ascending and pairwise disjoint.
    """

    added: List[TileAddress] = field(default_factory=list)
    updated: List[TileAddress] = field(default_factory=list)
    removed: List[TileAddress] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.updated or self.removed)

    def to_numpy(self) -> Dict[str, NDArray[np.uint64]]:
        """
        Convert to NumPy arrays

        Returns:
            Dictionary mapping "added", "updated", "removed" to uint64 arrays
        """
        return {
            "added": np.asarray(self.added, dtype=np.uint64),
            "updated": np.asarray(self.updated, dtype=np.uint64),
            "removed": np.asarray(self.removed, dtype=np.uint64),
        }

    def __repr__(self):
        return (
            f"TileSetUpdate(added={len(self.added)}, updated={len(self.updated)}, "
            f"removed={len(self.removed)})"
        )
