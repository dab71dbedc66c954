"""
Rasterer - turns map queries into tile grids
"""

import logging
from pathlib import Path
from typing import Any, Mapping

from quadraster.core.config import QuadtreeConfig, get_tileset
from quadraster.core.result import RasterResult
from quadraster.grid.addressing import depth
from quadraster.grid.quadtree import QuadtreeGrid
from quadraster.io.base import TileStore
from quadraster.io.tile_directory import TileDirectory
from quadraster.query.assembly import assemble_grid
from quadraster.query.params import RasterQuery
from quadraster.query.selection import select_tiles

logger = logging.getLogger(__name__)


class Rasterer:
    """
    Answers raster queries against one quadtree tile set

    Orchestrates tile selection (via the quadtree grid), grid assembly, and
    resource lookup (via an optional tile store). Holds no per-query state,
    so one instance can serve any number of queries.

    Attributes:
        config: Tile set configuration
        grid: QuadtreeGrid built from the config
        store: Optional TileStore used to locate tile images

    Examples:
        >>> from quadraster.io import TileDirectory
        >>>
        >>> rasterer = Rasterer.from_tile_store(TileDirectory("img/"), tileset="berkeley")
        >>> result = rasterer.raster(
        ...     RasterQuery(-122.2998, 37.8922, -122.2119, 37.8228, width=305)
        ... )
        >>> result.depth
        1
        >>> result.render_grid
        (('1', '2'), ('3', '4'))
    """

    def __init__(self, config: QuadtreeConfig, store: TileStore | None = None):
        """
        Initialize Rasterer

        Args:
            config: Tile set configuration
            store: Optional tile store for resolving tile images
        """
        self.config = config
        self.grid = QuadtreeGrid(config)
        self.store = store

    @classmethod
    def from_tile_store(
        cls,
        store: TileStore,
        config: QuadtreeConfig | None = None,
        tileset: str = "berkeley",
    ) -> "Rasterer":
        """
        Build a Rasterer whose max depth comes from the store's tile count

        Args:
            store: Tile store to probe
            config: Tile set bounds (default: the named built-in tile set)
            tileset: Built-in tile set used when config is not given

        Raises:
            ConfigurationError: If the store cannot be read or its tile count
                does not form a complete quadtree
        """
        base = config or get_tileset(tileset)
        count = store.count_tiles()
        derived = QuadtreeConfig.from_tile_count(
            count,
            root_ullon=base.root_ullon,
            root_ullat=base.root_ullat,
            root_lrlon=base.root_lrlon,
            root_lrlat=base.root_lrlat,
            tile_size=base.tile_size,
        )
        logger.info("Loaded %d tiles from %r (max depth %d)", count, store, derived.max_depth)
        return cls(derived, store=store)

    def raster(self, query: RasterQuery) -> RasterResult:
        """
        Find the grid of tiles that draws a query

        Args:
            query: Query box and viewport width

        Returns:
            RasterResult; success is False when no tile overlaps the query or
            the viewport width is not positive

        Raises:
            AddressingError: If selection and navigation disagree (a bug)
        """
        tiles = select_tiles(self.grid, query)
        if not tiles:
            logger.debug("No tiles selected for %s", query)
            return RasterResult.failed()

        render_grid = assemble_grid(self.grid, tiles)
        bounds = self.grid.union_bounds(tiles)

        return RasterResult(
            success=True,
            ullon=bounds.ullon,
            ullat=bounds.ullat,
            lrlon=bounds.lrlon,
            lrlat=bounds.lrlat,
            depth=depth(render_grid[0][0]),
            render_grid=render_grid,
        )

    def get_map_raster(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """
        Answer a query given as decoded request parameters

        Args:
            params: Mapping with ullon, ullat, lrlon, lrlat, w (and optionally h)

        Returns:
            Front-end mapping (see RasterResult.to_dict); grid cells are
            resource locators when a tile store is configured

        Raises:
            QueryError: If parameters are missing or not numeric
        """
        logger.debug("Raster request: %s", dict(params))
        query = RasterQuery.from_params(params)
        locator = self.store.locate if self.store is not None else None
        return self.raster(query).to_dict(locator=locator)


def open_tileset(
    path: str | Path,
    config: QuadtreeConfig | str | Path | None = None,
    tileset: str = "berkeley",
    suffix: str = ".png",
) -> Rasterer:
    """
    Open a directory of tile images for querying

    Args:
        path: Directory containing the tile images
        config: Tile set bounds as a QuadtreeConfig or a path to a JSON config
            (default: the named built-in tile set)
        tileset: Built-in tile set used when config is not given
        suffix: File extension of tile images

    Returns:
        Rasterer whose max depth matches the number of tiles found

    Raises:
        ConfigurationError: If the directory is unreadable, the config is
            invalid, or the tile count does not form a complete quadtree

    Examples:
        >>> import quadraster as qr
        >>> rasterer = qr.open_tileset("img/")
        >>> rasterer.get_map_raster({"ullon": -122.24, "ullat": 37.87,
        ...                          "lrlon": -122.22, "lrlat": 37.85, "w": 512})["depth"]
        4
    """
    if isinstance(config, (str, Path)):
        config = QuadtreeConfig.from_json(config)
    return Rasterer.from_tile_store(TileDirectory(path, suffix=suffix), config=config, tileset=tileset)
