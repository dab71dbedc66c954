"""
Quadraster Query Module

Tile selection, grid assembly, and spatial query helpers.
"""

from quadraster.query.assembly import assemble_grid
from quadraster.query.params import RasterQuery
from quadraster.query.rasterer import Rasterer, open_tileset
from quadraster.query.selection import select_tiles
from quadraster.query.spatial import (
    geometry_to_query,
    raster_geometry,
    tiles_intersecting_geometry,
)

__all__ = [
    "RasterQuery",
    "Rasterer",
    "assemble_grid",
    "geometry_to_query",
    "open_tileset",
    "raster_geometry",
    "select_tiles",
    "tiles_intersecting_geometry",
]
