"""
Quadraster - pick the quadtree map tiles that draw a map view

Given a bounding box and a viewport width, selects the coarsest level of a
pre-rendered tile pyramid that is still sharp enough, and returns the
overlapping tiles as a row-major grid ready for stitching.

Quick Start:
    >>> import quadraster as qr
    >>>
    >>> # Open a directory of tile images (root.png, 1.png, ..., 4444444.png)
    >>> rasterer = qr.open_tileset("./img", tileset="berkeley")
    >>>
    >>> # Query a view 512 pixels wide
    >>> result = rasterer.raster(qr.RasterQuery(-122.24, 37.87, -122.22, 37.85, width=512))
    >>> result.depth, result.shape
    (4, (5, 5))
    >>>
    >>> # Or use the front-end parameter mapping
    >>> rasterer.get_map_raster({"ullon": -122.24, "ullat": 37.87,
    ...                          "lrlon": -122.22, "lrlat": 37.85, "w": 512})
"""

from quadraster.core import (
    BUILTIN_TILESETS,
    AddressingError,
    ConfigurationError,
    GeometryError,
    QuadrasterError,
    QueryError,
    QuadtreeConfig,
    RasterResult,
    depth_from_tile_count,
    get_tileset,
)
from quadraster.grid import (
    ROOT,
    QuadtreeGrid,
    TileBounds,
    identity_to_index,
    index_to_identity,
    neighbor_down,
    neighbor_right,
)
from quadraster.io import TileDirectory
from quadraster.query import (
    RasterQuery,
    Rasterer,
    assemble_grid,
    geometry_to_query,
    open_tileset,
    raster_geometry,
    select_tiles,
)

__version__ = "0.1.0"

__all__ = [
    "BUILTIN_TILESETS",
    "ROOT",
    "AddressingError",
    "ConfigurationError",
    "GeometryError",
    "QuadrasterError",
    "QueryError",
    "QuadtreeConfig",
    "QuadtreeGrid",
    "RasterQuery",
    "RasterResult",
    "Rasterer",
    "TileBounds",
    "TileDirectory",
    "__version__",
    "assemble_grid",
    "depth_from_tile_count",
    "geometry_to_query",
    "get_tileset",
    "identity_to_index",
    "index_to_identity",
    "neighbor_down",
    "neighbor_right",
    "open_tileset",
    "raster_geometry",
    "select_tiles",
]

