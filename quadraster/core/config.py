"""
Quadtree tile set configuration.

A tile set is a fixed quadtree of pre-rendered images covering one root
bounding box. The root bounds and tile pixel size are properties of the
rendered tile set; ``max_depth`` is derived once from the number of tiles
the storage layer reports.
"""

import json
import logging
import math
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from quadraster.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 256


def depth_from_tile_count(count: int) -> int:
    """
    Derive the deepest quadtree level from a tile count

    A complete quadtree with levels ``0..L`` holds ``(4^(L+1) - 1) / 3``
    tiles.

    Args:
        count: Number of tile resources available

    Returns:
        The deepest level ``L``

    Raises:
        ConfigurationError: If no integer ``L`` matches ``count``

    Examples:
        >>> depth_from_tile_count(1)
        0
        >>> depth_from_tile_count(21)
        2
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise ConfigurationError(f"Tile count must be a positive integer, got {count!r}")

    target = 3 * count + 1
    level_size = 4
    depth = 0
    while level_size < target:
        level_size *= 4
        depth += 1

    if level_size != target:
        raise ConfigurationError(
            f"{count} tiles do not form a complete quadtree "
            f"(expected (4^(L+1) - 1) / 3 for some integer L)"
        )
    return depth


@dataclass(frozen=True)
class QuadtreeConfig:
    """
    Immutable description of one quadtree tile set.

    Attributes:
        root_ullon: Upper-left longitude of the root tile
        root_ullat: Upper-left latitude of the root tile
        root_lrlon: Lower-right longitude of the root tile
        root_lrlat: Lower-right latitude of the root tile
        tile_size: Pixel width of every tile image
        max_depth: Deepest level at which tiles exist (root is level 0)

    Examples:
        >>> config = QuadtreeConfig(
        ...     root_ullon=-122.2998046875,
        ...     root_ullat=37.892195547244356,
        ...     root_lrlon=-122.2119140625,
        ...     root_lrlat=37.82280243352756,
        ...     max_depth=7,
        ... )
        >>> config.root_bounds
        (-122.2998046875, 37.892195547244356, -122.2119140625, 37.82280243352756)
    """

    root_ullon: float
    root_ullat: float
    root_lrlon: float
    root_lrlat: float
    tile_size: int = DEFAULT_TILE_SIZE
    max_depth: int = 0

    def __post_init__(self):
        bounds = (self.root_ullon, self.root_ullat, self.root_lrlon, self.root_lrlat)
        if not all(math.isfinite(v) for v in bounds):
            raise ConfigurationError(f"Root bounds must be finite, got {bounds}")
        if not self.root_ullon < self.root_lrlon:
            raise ConfigurationError(
                f"Root upper-left longitude {self.root_ullon} must be west of "
                f"lower-right longitude {self.root_lrlon}"
            )
        if not self.root_ullat > self.root_lrlat:
            raise ConfigurationError(
                f"Root upper-left latitude {self.root_ullat} must be north of "
                f"lower-right latitude {self.root_lrlat}"
            )
        if self.tile_size <= 0:
            raise ConfigurationError(f"Tile size must be positive, got {self.tile_size}")
        if self.max_depth < 0:
            raise ConfigurationError(f"Max depth must be non-negative, got {self.max_depth}")

    @property
    def root_bounds(self) -> tuple[float, float, float, float]:
        """Root bounds as (ullon, ullat, lrlon, lrlat)"""
        return (self.root_ullon, self.root_ullat, self.root_lrlon, self.root_lrlat)

    @property
    def tile_count(self) -> int:
        """Number of tiles in a complete tree down to max_depth"""
        return (4 ** (self.max_depth + 1) - 1) // 3

    def with_max_depth(self, max_depth: int) -> "QuadtreeConfig":
        return replace(self, max_depth=max_depth)

    @classmethod
    def from_tile_count(
        cls,
        count: int,
        root_ullon: float,
        root_ullat: float,
        root_lrlon: float,
        root_lrlat: float,
        tile_size: int = DEFAULT_TILE_SIZE,
    ) -> "QuadtreeConfig":
        """Build a config whose max_depth is derived from a tile count"""
        max_depth = depth_from_tile_count(count)
        logger.debug("Derived max depth %d from %d tiles", max_depth, count)
        return cls(
            root_ullon=root_ullon,
            root_ullat=root_ullat,
            root_lrlon=root_lrlon,
            root_lrlat=root_lrlat,
            tile_size=tile_size,
            max_depth=max_depth,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "root_ullon": self.root_ullon,
            "root_ullat": self.root_ullat,
            "root_lrlon": self.root_lrlon,
            "root_lrlat": self.root_lrlat,
            "tile_size": self.tile_size,
            "max_depth": self.max_depth,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuadtreeConfig":
        try:
            return cls(
                root_ullon=float(data["root_ullon"]),
                root_ullat=float(data["root_ullat"]),
                root_lrlon=float(data["root_lrlon"]),
                root_lrlat=float(data["root_lrlat"]),
                tile_size=int(data.get("tile_size", DEFAULT_TILE_SIZE)),
                max_depth=int(data.get("max_depth", 0)),
            )
        except KeyError as e:
            raise ConfigurationError(f"Missing tile set setting: {e.args[0]}") from e
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid tile set setting: {e}") from e

    @classmethod
    def from_json(cls, path: str | Path) -> "QuadtreeConfig":
        """Load a tile set config from a JSON file"""
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read tile set config {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Malformed tile set config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Tile set config {path} must be a JSON object")
        return cls.from_dict(data)

    def __repr__(self):
        return (
            f"<QuadtreeConfig: ({self.root_ullon}, {self.root_ullat}) -> "
            f"({self.root_lrlon}, {self.root_lrlat}), "
            f"tile_size={self.tile_size}, max_depth={self.max_depth}>"
        )


# Built-in tile sets; max_depth is filled in from the tile store at startup
BUILTIN_TILESETS = {
    "berkeley": QuadtreeConfig(
        root_ullon=-122.2998046875,
        root_ullat=37.892195547244356,
        root_lrlon=-122.2119140625,
        root_lrlat=37.82280243352756,
        tile_size=256,
        max_depth=7,
    ),
}


def get_tileset(name: str) -> QuadtreeConfig:
    """Look up a built-in tile set by name."""
    try:
        return BUILTIN_TILESETS[name]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_TILESETS))
        raise ConfigurationError(f"Unknown tile set '{name}' (known: {known})") from None
