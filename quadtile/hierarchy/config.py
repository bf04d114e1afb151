"""
Tile set configuration

Construction-time parameters of a tile hierarchy. Fixed for its lifetime.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from quadtile.core.exceptions import ValidationError
from quadtile.grid.address import MAX_COORD, MAX_LEVEL
from quadtile.grid.bounds import SpatialBounds

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE_PX = 256


@dataclass(frozen=True)
class TileSetConfig:
    """
    Configuration of a tile hierarchy

    Attributes:
        bounds: Global extent covered by the root grid
        min_level: Coarsest level ever reported as resident
        max_level: Finest level the hierarchy refines to
        num_root_tiles_x: Root grid columns
        num_root_tiles_y: Root grid rows
        tile_size_px: Native pixel size of one tile; a tile projecting larger
            than this on screen is refined
        check_invariants: Verify sortedness before every set diff

    Examples:
        >>> config = TileSetConfig(
        ...     bounds=SpatialBounds(-180.0, 180.0, -90.0, 90.0),
        ...     max_level=18,
        ...     num_root_tiles_x=2,
        ... )
    """

    bounds: SpatialBounds
    min_level: int = 0
    max_level: int = 0
    num_root_tiles_x: int = 1
    num_root_tiles_y: int = 1
    tile_size_px: int = DEFAULT_TILE_SIZE_PX
    check_invariants: bool = False

    def __post_init__(self):
        if not 0 <= self.min_level <= self.max_level <= MAX_LEVEL:
            raise ValidationError(
                f"Levels must satisfy 0 <= min_level <= max_level <= {MAX_LEVEL}, "
                f"got min_level={self.min_level}, max_level={self.max_level}"
            )
        if self.num_root_tiles_x < 1 or self.num_root_tiles_y < 1:
            raise ValidationError(
                f"Root grid must be at least 1x1, "
                f"got {self.num_root_tiles_x}x{self.num_root_tiles_y}"
            )
        # Finest-level coordinates must still fit the address layout
        span = 1 << self.max_level
        for name, n in (("x", self.num_root_tiles_x), ("y", self.num_root_tiles_y)):
            if n * span - 1 > MAX_COORD:
                raise ValidationError(
                    f"{n} root tiles along {name} at max_level={self.max_level} "
                    f"exceed the {MAX_COORD + 1} addressable tiles per axis"
                )
        if self.tile_size_px <= 0:
            raise ValidationError(f"tile_size_px must be positive, got {self.tile_size_px}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "bounds": list(self.bounds.to_tuple()),
            "min_level": self.min_level,
            "max_level": self.max_level,
            "num_root_tiles_x": self.num_root_tiles_x,
            "num_root_tiles_y": self.num_root_tiles_y,
            "tile_size_px": self.tile_size_px,
            "check_invariants": self.check_invariants,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TileSetConfig":
        """
        Build from a dict; `bounds` is (minx, miny, maxx, maxy)

        Raises:
            ValidationError: If a required key is missing or a value is invalid
        """
        try:
            bounds = SpatialBounds.from_tuple(tuple(data["bounds"]))
            return cls(
                bounds=bounds,
                min_level=int(data.get("min_level", 0)),
                max_level=int(data["max_level"]),
                num_root_tiles_x=int(data.get("num_root_tiles_x", 1)),
                num_root_tiles_y=int(data.get("num_root_tiles_y", 1)),
                tile_size_px=int(data.get("tile_size_px", DEFAULT_TILE_SIZE_PX)),
                check_invariants=bool(data.get("check_invariants", False)),
            )
        except KeyError as e:
            raise ValidationError(f"Missing configuration key: {e}")
        except (TypeError, ValueError) as e:
            if isinstance(e, ValidationError):
                raise
            raise ValidationError(f"Invalid configuration value: {e}")

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "TileSetConfig":
        """Load a configuration from a JSON file"""
        path = Path(path)
        with open(path) as f:
            data = json.load(f)
        config = cls.from_dict(data)
        logger.debug("Loaded tile set configuration from %s", path)
        return config
