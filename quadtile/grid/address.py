"""
Tile Address Codec

Packs a quadtree coordinate (level, x, y) into a single 64-bit key.

Layout (most significant first):
    unused  level   x        y
    8 bits  8 bits  24 bits  24 bits

Because level sits above x and x above y, sorting packed addresses
numerically is the same as sorting (level, x, y) tuples.
"""

from typing import NewType, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from quadtile.core.exceptions import InvalidCoordinateError

TileAddress = NewType("TileAddress", int)

LEVEL_BITS = 8
COORD_BITS = 24

MAX_LEVEL = (1 << LEVEL_BITS) - 1
MAX_COORD = (1 << COORD_BITS) - 1

_LEVEL_SHIFT = 2 * COORD_BITS
_X_SHIFT = COORD_BITS


def encode(level: int, x: int, y: int) -> TileAddress:
    """
    Pack a tile coordinate into an address

    Args:
        level: Quadtree level (0 for root tiles), 0..255
        x: Column index at that level, 0..2^24-1
        y: Row index at that level, 0..2^24-1

    Returns:
        Packed 64-bit tile address

    Raises:
        InvalidCoordinateError: If any field is outside its range

    Examples:
        >>> encode(2, 1, 3)
        562949970198531
        >>> decode(encode(2, 1, 3))
        (2, 1, 3)
    """
    if not 0 <= level <= MAX_LEVEL:
        raise InvalidCoordinateError(f"Level must be in [0, {MAX_LEVEL}], got {level}")
    if not 0 <= x <= MAX_COORD:
        raise InvalidCoordinateError(f"x must be in [0, {MAX_COORD}], got {x}")
    if not 0 <= y <= MAX_COORD:
        raise InvalidCoordinateError(f"y must be in [0, {MAX_COORD}], got {y}")

    return TileAddress((level << _LEVEL_SHIFT) | (x << _X_SHIFT) | y)


def decode(address: int) -> Tuple[int, int, int]:
    """
    Unpack an address into (level, x, y)

    Raises:
        InvalidCoordinateError: If the address has bits outside the packed layout
    """
    if address < 0 or address >> (_LEVEL_SHIFT + LEVEL_BITS):
        raise InvalidCoordinateError(f"Not a tile address: {address}")

    level = address >> _LEVEL_SHIFT
    x = (address >> _X_SHIFT) & MAX_COORD
    y = address & MAX_COORD
    return (level, x, y)


def level_of(address: int) -> int:
    """Level of a packed address"""
    return decode(address)[0]


def child_address(address: int, quadrant_x: int, quadrant_y: int) -> TileAddress:
    """
    Address of one child of a tile

    The child sits at level + 1 with coordinates (2x + qx, 2y + qy).
    """
    if quadrant_x not in (0, 1) or quadrant_y not in (0, 1):
        raise InvalidCoordinateError(
            f"Quadrant must be 0 or 1 on each axis, got ({quadrant_x}, {quadrant_y})"
        )
    level, x, y = decode(address)
    return encode(level + 1, 2 * x + quadrant_x, 2 * y + quadrant_y)


def parent_address(address: int) -> TileAddress:
    """
    Address of the tile's parent

    Raises:
        InvalidCoordinateError: If the address is a root (level 0)
    """
    level, x, y = decode(address)
    if level == 0:
        raise InvalidCoordinateError(f"Root tile {format_address(address)} has no parent")
    return encode(level - 1, x >> 1, y >> 1)


def format_address(address: int) -> str:
    """Format an address as "level/x/y" (e.g. "2/1/3")"""
    level, x, y = decode(address)
    return f"{level}/{x}/{y}"


def parse_address(text: str) -> TileAddress:
    """
    Parse a "level/x/y" key back into an address

    Raises:
        InvalidCoordinateError: If the text is malformed or out of range
    """
    parts = text.strip().split("/")
    if len(parts) != 3:
        raise InvalidCoordinateError(f"Invalid tile key format: {text!r}")
    try:
        level, x, y = (int(p) for p in parts)
    except ValueError as e:
        raise InvalidCoordinateError(f"Invalid tile key {text!r}: {e}")
    return encode(level, x, y)


def encode_many(levels: ArrayLike, xs: ArrayLike, ys: ArrayLike) -> NDArray[np.uint64]:
    """
    Vectorised encode()

    Args:
        levels: Tile levels (scalar or array, broadcast against xs/ys)
        xs: Column indices
        ys: Row indices

    Returns:
        uint64 array of packed addresses

    Raises:
        InvalidCoordinateError: If any element is outside its range
    """
    levels_arr = np.asarray(levels, dtype=np.int64)
    xs_arr = np.asarray(xs, dtype=np.int64)
    ys_arr = np.asarray(ys, dtype=np.int64)

    if np.any((levels_arr < 0) | (levels_arr > MAX_LEVEL)):
        raise InvalidCoordinateError(f"Levels must be in [0, {MAX_LEVEL}]")
    if np.any((xs_arr < 0) | (xs_arr > MAX_COORD)):
        raise InvalidCoordinateError(f"x values must be in [0, {MAX_COORD}]")
    if np.any((ys_arr < 0) | (ys_arr > MAX_COORD)):
        raise InvalidCoordinateError(f"y values must be in [0, {MAX_COORD}]")

    levels_u = levels_arr.astype(np.uint64)
    xs_u = xs_arr.astype(np.uint64)
    ys_u = ys_arr.astype(np.uint64)
    return (levels_u << np.uint64(_LEVEL_SHIFT)) | (xs_u << np.uint64(_X_SHIFT)) | ys_u


def decode_many(
    addresses: ArrayLike,
) -> Tuple[NDArray[np.int64], NDArray[np.int64], NDArray[np.int64]]:
    """Vectorised decode(): returns (levels, xs, ys) as int64 arrays"""
    packed = np.asarray(addresses, dtype=np.uint64)
    mask = np.uint64(MAX_COORD)

    levels = (packed >> np.uint64(_LEVEL_SHIFT)).astype(np.int64)
    xs = ((packed >> np.uint64(_X_SHIFT)) & mask).astype(np.int64)
    ys = (packed & mask).astype(np.int64)

    if np.any(levels > MAX_LEVEL):
        raise InvalidCoordinateError("Array contains values outside the tile address layout")
    return levels, xs, ys
