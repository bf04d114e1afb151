"""
QuadTile Exceptions

Exception hierarchy for error handling.
"""


class QuadTileError(Exception):
    """Base exception for QuadTile"""

    pass


class InvalidCoordinateError(QuadTileError, ValueError):
    """Tile level/x/y outside the packable range"""

    pass


class AddressNotFoundError(QuadTileError, KeyError):
    """Tile address has no materialized node"""

    pass


class PreconditionViolatedError(QuadTileError):
    """Input violates a documented precondition (e.g. unsorted keys)"""

    pass


class ValidationError(QuadTileError, ValueError):
    """Bounds or configuration validation failed"""

    pass
