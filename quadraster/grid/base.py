"""
Tile Grid System Protocol

Geographic tile grid for a quadtree of pre-rendered images.
"""

from dataclasses import dataclass
from typing import Protocol, Tuple

from shapely.geometry import Polygon, box


@dataclass(frozen=True)
class TileBounds:
    """
    Geographic bounds of a tile or raster

    Attributes:
        ullon: Upper-left longitude (western edge)
        ullat: Upper-left latitude (northern edge)
        lrlon: Lower-right longitude (eastern edge)
        lrlat: Lower-right latitude (southern edge)
    """

    ullon: float
    ullat: float
    lrlon: float
    lrlat: float

    @property
    def width(self) -> float:
        """Longitude extent"""
        return abs(self.ullon - self.lrlon)

    @property
    def height(self) -> float:
        """Latitude extent"""
        return abs(self.ullat - self.lrlat)

    def lon_dpp(self, pixel_width: float) -> float:
        """Longitude distance per pixel when drawn pixel_width pixels wide"""
        return self.width / pixel_width

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Bounds as (ullon, ullat, lrlon, lrlat)"""
        return (self.ullon, self.ullat, self.lrlon, self.lrlat)

    def to_bbox(self) -> Tuple[float, float, float, float]:
        """Bounds as (minx, miny, maxx, maxy)"""
        return (
            min(self.ullon, self.lrlon),
            min(self.ullat, self.lrlat),
            max(self.ullon, self.lrlon),
            max(self.ullat, self.lrlat),
        )

    def to_box(self) -> Polygon:
        """Bounds as a shapely polygon"""
        return box(*self.to_bbox())


class TileGrid(Protocol):
    """
    Geographic tile grid system for quadtree tile sets

    Every tile of the tree is a fixed-size image (e.g. 256×256 pixels).
    Each level halves the geographic extent of its parent along both axes,
    so every level doubles the resolution:
    - root: whole tile set in one image
    - depth 1: 2×2 images
    - depth d: 2^d × 2^d images
    """

    max_depth: int
    tile_size: int

    def bounds_of(self, identity: str) -> TileBounds:
        """
        Geographic bounds of a tile

        Args:
            identity: Tile identity (e.g., "root", "2", "143")

        Returns:
            TileBounds with upper-left and lower-right corners
        """
        ...

    def lon_dpp(self, identity: str) -> float:
        """
        Longitude distance per pixel of a tile

        Args:
            identity: Tile identity

        Returns:
            Degrees of longitude covered by one pixel of the tile image
        """
        ...

    def lon_dpp_at_depth(self, depth: int) -> float:
        """Longitude distance per pixel shared by every tile at a depth"""
        ...

    def get_tile_bounds(self, identity: str) -> Tuple[float, float, float, float]:
        """
        Get geographic bounds of a tile

        Args:
            identity: Tile identity

        Returns:
            Bounding box as (minx, miny, maxx, maxy)
        """
        ...

    def intersects(self, bounds: TileBounds, query) -> bool:
        """Whether tile bounds overlap a query box (touching edges do not)"""
        ...
