"""
Tests for TileNode
"""

import gc

import pytest

from quadtile.core.exceptions import InvalidCoordinateError
from quadtile.grid.address import decode, encode
from quadtile.grid.bounds import SpatialBounds
from quadtile.grid.node import (
    CLIP_ALL,
    CLIP_LB,
    CLIP_LT,
    CLIP_NONE,
    CLIP_RB,
    CLIP_RT,
    RESOLUTION_UNSET,
    Quadrant,
    TileNode,
    compare_by_level,
    level_order_key,
)


@pytest.fixture
def root():
    """Western hemisphere root tile at grid position (0, 0)"""
    return TileNode.root(SpatialBounds(-180.0, 0.0, -90.0, 90.0), 0, 0)


class TestQuadrant:
    """Test quadrant constants"""

    def test_offsets(self):
        """Test left/right maps to x and bottom/top maps to y"""
        assert Quadrant.LT.offset == (0, 1)
        assert Quadrant.LB.offset == (0, 0)
        assert Quadrant.RB.offset == (1, 0)
        assert Quadrant.RT.offset == (1, 1)

    def test_clip_bits(self):
        """Test one distinct bit per quadrant"""
        assert (CLIP_LT, CLIP_LB, CLIP_RB, CLIP_RT) == (1, 2, 4, 8)
        assert CLIP_NONE == 0
        assert CLIP_ALL == 15


class TestTileNode:
    """Test construction and ownership"""

    def test_root_construction(self, root):
        """Test root defaults"""
        assert root.level == 0
        assert (root.x, root.y) == (0, 0)
        assert root.address == encode(0, 0, 0)
        assert root.parent is None
        assert root.is_root
        assert root.is_leaf
        assert root.clip_mask == CLIP_NONE
        assert root.resolution_hint == RESOLUTION_UNSET

    def test_root_address_uses_grid_position(self):
        """Test a root's address is level 0 with its root grid coordinates"""
        node = TileNode.root(SpatialBounds(0.0, 180.0, -90.0, 90.0), 1, 0)
        assert decode(node.address) == (0, 1, 0)

    def test_child_derivation(self, root):
        """Test level, address and bounds derive from the parent"""
        child = root.get_or_create_child(Quadrant.RT)

        assert child.level == 1
        assert (child.x, child.y) == (1, 1)
        assert child.address == encode(1, 1, 1)
        assert child.bounds == root.bounds.quarter(1, 1)
        assert child.parent is root
        assert child.clip_mask == CLIP_NONE
        assert child.resolution_hint == RESOLUTION_UNSET
        assert not root.is_leaf

    def test_grandchild_derivation(self):
        """Test child coordinates are (2x + qx, 2y + qy)"""
        node = TileNode.root(SpatialBounds(0.0, 180.0, -90.0, 90.0), 1, 0)
        child = node.get_or_create_child(Quadrant.LT)
        grandchild = child.get_or_create_child(Quadrant.RB)

        assert decode(child.address) == (1, 2, 1)
        assert decode(grandchild.address) == (2, 5, 2)
        assert grandchild.parent.parent is node

    def test_get_or_create_is_idempotent(self, root):
        """Test the same child object is returned on repeated calls"""
        first = root.get_or_create_child(Quadrant.LB)
        assert root.get_or_create_child(Quadrant.LB) is first
        assert root.child(Quadrant.LB) is first
        assert root.child(Quadrant.RB) is None

    def test_child_of_does_not_attach(self, root):
        """Test child_of builds a node without filling the slot"""
        orphan = TileNode.child_of(root, Quadrant.LB)
        assert orphan.parent is root
        assert root.child(Quadrant.LB) is None

    def test_children_in_quadrant_order(self, root):
        """Test children() yields materialized slots in LT, LB, RB, RT order"""
        rt = root.get_or_create_child(Quadrant.RT)
        lt = root.get_or_create_child(Quadrant.LT)
        assert list(root.children()) == [lt, rt]

    def test_detach_releases_subtree(self, root):
        """Test detaching a child tears down its descendants"""
        child = root.get_or_create_child(Quadrant.LB)
        grandchild = child.get_or_create_child(Quadrant.RT)

        detached = root.detach_child(Quadrant.LB)

        assert detached is child
        assert root.child(Quadrant.LB) is None
        assert root.is_leaf
        assert child.parent is None
        assert child.is_leaf
        assert grandchild.parent is None

    def test_detach_empty_slot(self, root):
        """Test detaching an empty slot is a no-op"""
        assert root.detach_child(Quadrant.RB) is None

    def test_parent_link_is_weak(self):
        """Test a child does not keep its parent alive"""
        parent = TileNode.root(SpatialBounds(0.0, 1.0, 0.0, 1.0), 0, 0)
        child = parent.get_or_create_child(Quadrant.LB)
        assert child.parent is parent
        del parent
        gc.collect()
        assert child.parent is None

    def test_iter_subtree(self, root):
        """Test depth-first iteration covers every materialized node"""
        lb = root.get_or_create_child(Quadrant.LB)
        rt = root.get_or_create_child(Quadrant.RT)
        lb_rb = lb.get_or_create_child(Quadrant.RB)

        nodes = list(root.iter_subtree())

        assert nodes[0] is root
        assert set(map(id, nodes)) == {id(root), id(lb), id(rt), id(lb_rb)}
        assert nodes.index(lb_rb) == nodes.index(lb) + 1

    def test_children_beyond_address_range(self):
        """Test coordinates that overflow 24 bits are rejected"""
        node = TileNode(1, (1 << 24) - 1, 0, SpatialBounds(0.0, 1.0, 0.0, 1.0))
        with pytest.raises(InvalidCoordinateError):
            node.get_or_create_child(Quadrant.RB)


class TestLevelOrdering:
    """Test level comparison helpers"""

    def test_compare_by_level(self, root):
        """Test coarser tiles compare lower"""
        child = root.get_or_create_child(Quadrant.LB)
        assert compare_by_level(root, child)
        assert not compare_by_level(child, root)
        assert not compare_by_level(root, root)

    def test_level_order_key(self, root):
        """Test sorting is coarse-first with ties broken by address"""
        rt = root.get_or_create_child(Quadrant.RT)
        lb = root.get_or_create_child(Quadrant.LB)
        deep = lb.get_or_create_child(Quadrant.LT)

        ordered = sorted([deep, rt, root, lb], key=level_order_key)

        assert ordered == [root, lb, rt, deep]
