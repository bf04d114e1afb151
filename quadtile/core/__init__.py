"""
QuadTile Core Module

Exceptions shared by every QuadTile module.
"""

from quadtile.core.exceptions import (
    AddressNotFoundError,
    InvalidCoordinateError,
    PreconditionViolatedError,
    QuadTileError,
    ValidationError,
)

__all__ = [
    "QuadTileError",
    "InvalidCoordinateError",
    "AddressNotFoundError",
    "PreconditionViolatedError",
    "ValidationError",
]
