"""
QuadtreeGrid Implementation

Implements tile geometry for a quadtree tile set.
"""

from typing import Iterable, Tuple

from quadraster.core.config import QuadtreeConfig
from quadraster.core.exceptions import GeometryError
from quadraster.grid.addressing import ROOT
from quadraster.grid.base import TileBounds


class QuadtreeGrid:
    """
    Quadtree tile grid over a fixed root bounding box

    Tile bounds are never stored: they are recomputed from the identity by
    halving the root bounds once per digit, so geometry and addressing
    cannot drift apart.

    Examples:
        >>> from quadraster.core.config import get_tileset
        >>> grid = QuadtreeGrid(get_tileset("berkeley"))
        >>> grid.bounds_of("1").lrlon
        -122.255859375
        >>>
        >>> grid.lon_dpp("root")  # 0.087890625 degrees / 256 pixels
        0.00034332275390625
    """

    def __init__(self, config: QuadtreeConfig):
        """
        Initialize tile grid

        Args:
            config: Tile set configuration (root bounds, tile size, max depth)
        """
        self.config = config
        self.root = TileBounds(*config.root_bounds)

    @property
    def max_depth(self) -> int:
        return self.config.max_depth

    @property
    def tile_size(self) -> int:
        return self.config.tile_size

    def bounds_of(self, identity: str) -> TileBounds:
        """
        Get geographic bounds of a tile

        Args:
            identity: Tile identity (e.g., "root", "3", "142")

        Returns:
            TileBounds of the tile

        Raises:
            GeometryError: If the identity contains a digit outside 1-4
        """
        if identity == ROOT:
            return self.root
        if not isinstance(identity, str) or not identity:
            raise GeometryError(f"Invalid tile identity: {identity!r}")

        ullon, ullat, lrlon, lrlat = self.root.as_tuple()
        for digit in identity:
            if digit == "1":
                lrlon = (ullon + lrlon) / 2
                lrlat = (ullat + lrlat) / 2
            elif digit == "2":
                ullon = (ullon + lrlon) / 2
                lrlat = (ullat + lrlat) / 2
            elif digit == "3":
                ullat = (ullat + lrlat) / 2
                lrlon = (ullon + lrlon) / 2
            elif digit == "4":
                ullon = (ullon + lrlon) / 2
                ullat = (ullat + lrlat) / 2
            else:
                raise GeometryError(f"Invalid quadrant digit {digit!r} in tile {identity!r}")

        return TileBounds(ullon, ullat, lrlon, lrlat)

    def lon_dpp(self, identity: str) -> float:
        """Longitude distance per pixel of a tile image"""
        return self.bounds_of(identity).lon_dpp(self.tile_size)

    def lon_dpp_at_depth(self, depth: int) -> float:
        """Longitude distance per pixel of any tile at the given depth"""
        return self.root.width / (2**depth) / self.tile_size

    def get_tile_bounds(self, identity: str) -> Tuple[float, float, float, float]:
        """Bounds of a tile as (minx, miny, maxx, maxy)"""
        return self.bounds_of(identity).to_bbox()

    @staticmethod
    def intersects(bounds: TileBounds, query) -> bool:
        """
        Check whether tile bounds overlap a query box

        Boxes that only touch along an edge do not overlap. The query is
        anything with ullon/ullat/lrlon/lrlat attributes and is compared as
        given, without normalizing its orientation.
        """
        return (
            bounds.lrlon > query.ullon
            and bounds.ullon < query.lrlon
            and bounds.lrlat < query.ullat
            and bounds.ullat > query.lrlat
        )

    def union_bounds(self, identities: Iterable[str]) -> TileBounds:
        """Smallest box covering all of the given tiles"""
        boxes = [self.bounds_of(i) for i in identities]
        if not boxes:
            raise GeometryError("Cannot take the union of an empty tile set")
        return TileBounds(
            ullon=min(b.ullon for b in boxes),
            ullat=max(b.ullat for b in boxes),
            lrlon=max(b.lrlon for b in boxes),
            lrlat=min(b.lrlat for b in boxes),
        )
