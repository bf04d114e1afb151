"""
Quadtree Tile Node

One cell of the tile quadtree. A node owns its (up to four) children and
keeps only a weak reference to its parent, so ownership runs strictly from
parent to child and no reference cycles exist.
"""

import weakref
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

from quadtile.grid.address import TileAddress, encode
from quadtile.grid.bounds import SpatialBounds

RESOLUTION_UNSET = -10


class Quadrant(IntEnum):
    """Child slot of a node: left/right x top/bottom"""

    LT = 0
    LB = 1
    RB = 2
    RT = 3

    @property
    def offset(self) -> Tuple[int, int]:
        """(quadrant_x, quadrant_y) with y growing northward"""
        return _QUADRANT_OFFSETS[self]

    @property
    def clip_bit(self) -> int:
        return 1 << int(self)


_QUADRANT_OFFSETS = {
    Quadrant.LT: (0, 1),
    Quadrant.LB: (0, 0),
    Quadrant.RB: (1, 0),
    Quadrant.RT: (1, 1),
}

CLIP_LT = Quadrant.LT.clip_bit
CLIP_LB = Quadrant.LB.clip_bit
CLIP_RB = Quadrant.RB.clip_bit
CLIP_RT = Quadrant.RT.clip_bit
CLIP_NONE = 0
CLIP_ALL = CLIP_LT | CLIP_LB | CLIP_RB | CLIP_RT


class TileNode:
    """
    A single quadtree tile

    Identity (address, level, x, y) and bounds are fixed at construction.
    `clip_mask` and `resolution_hint` are mutable view-dependent state that
    the tile hierarchy rewrites on every update.

    Use `TileNode.root()` for level-0 tiles and `get_or_create_child()` for
    everything below.
    """

    __slots__ = (
        "address",
        "level",
        "x",
        "y",
        "bounds",
        "clip_mask",
        "resolution_hint",
        "_parent",
        "_children",
        "__weakref__",
    )

    def __init__(
        self,
        level: int,
        x: int,
        y: int,
        bounds: SpatialBounds,
        parent: Optional["TileNode"] = None,
    ):
        self.address: TileAddress = encode(level, x, y)
        self.level = level
        self.x = x
        self.y = y
        self.bounds = bounds
        self.clip_mask = CLIP_NONE
        self.resolution_hint = RESOLUTION_UNSET
        self._parent = weakref.ref(parent) if parent is not None else None
        self._children: List[Optional[TileNode]] = [None, None, None, None]

    @classmethod
    def root(cls, bounds: SpatialBounds, x: int, y: int) -> "TileNode":
        """Create a root (level 0) tile at position (x, y) of the root grid"""
        return cls(0, x, y, bounds)

    @classmethod
    def child_of(cls, parent: "TileNode", quadrant: Quadrant) -> "TileNode":
        """
        Create (but do not attach) a child of `parent`

        Level, address and bounds are all derived from the parent.
        """
        qx, qy = Quadrant(quadrant).offset
        return cls(
            parent.level + 1,
            2 * parent.x + qx,
            2 * parent.y + qy,
            parent.bounds.quarter(qx, qy),
            parent=parent,
        )

    @property
    def parent(self) -> Optional["TileNode"]:
        """Parent node, or None for roots and detached subtrees"""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self) -> bool:
        return self.level == 0

    @property
    def is_leaf(self) -> bool:
        return all(c is None for c in self._children)

    def child(self, quadrant: Quadrant) -> Optional["TileNode"]:
        return self._children[quadrant]

    def children(self) -> Iterator["TileNode"]:
        """Materialized children in quadrant order (LT, LB, RB, RT)"""
        return (c for c in self._children if c is not None)

    def get_or_create_child(self, quadrant: Quadrant) -> "TileNode":
        node = self._children[quadrant]
        if node is None:
            node = TileNode.child_of(self, quadrant)
            self._children[quadrant] = node
        return node

    def detach_child(self, quadrant: Quadrant) -> Optional["TileNode"]:
        """Remove a child slot and release the whole subtree below it"""
        node = self._children[quadrant]
        if node is not None:
            self._children[quadrant] = None
            node.release()
        return node

    def release(self) -> None:
        """Tear down this subtree: drop children recursively and the parent link"""
        for i, node in enumerate(self._children):
            if node is not None:
                self._children[i] = None
                node.release()
        self._parent = None

    def iter_subtree(self) -> Iterator["TileNode"]:
        """This node and all materialized descendants, depth-first"""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed([c for c in node._children if c is not None]))

    def __repr__(self):
        return (
            f"TileNode(level={self.level}, x={self.x}, y={self.y}, "
            f"clip={self.clip_mask:#x}, res={self.resolution_hint})"
        )


def compare_by_level(a: TileNode, b: TileNode) -> bool:
    """
    Level ordering predicate: True if `a` is coarser than `b`

    Ascending by level, so coarse tiles come first when used for sorting.
    """
    return a.level < b.level


def level_order_key(node: TileNode) -> Tuple[int, int]:
    """Sort key matching compare_by_level, ties broken by address"""
    return (node.level, node.address)
