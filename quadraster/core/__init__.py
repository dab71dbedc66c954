"""
Quadraster Core Module

Configuration, exceptions, and result types.
"""

from quadraster.core.config import (
    BUILTIN_TILESETS,
    QuadtreeConfig,
    depth_from_tile_count,
    get_tileset,
)
from quadraster.core.exceptions import (
    AddressingError,
    ConfigurationError,
    GeometryError,
    QuadrasterError,
    QueryError,
)
from quadraster.core.result import RasterResult

__all__ = [
    # Configuration
    "BUILTIN_TILESETS",
    "QuadtreeConfig",
    "depth_from_tile_count",
    "get_tileset",
    # Results
    "RasterResult",
    # Exceptions
    "QuadrasterError",
    "ConfigurationError",
    "AddressingError",
    "GeometryError",
    "QueryError",
]
