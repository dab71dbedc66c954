"""
Raster Result

Container for the outcome of a raster query with multiple output formats.
"""

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class RasterResult:
    """
    Outcome of a raster query

    On success, holds the tiles to draw as a row-major grid together with
    the bounds of the area they cover. A failed result (query box off the
    map, unusable viewport) carries no other fields.

    Provides multiple output formats for different use cases:
    - to_dict: Mapping consumed by the map front end
    - to_numpy: Grid as a 2-D string array

    Attributes:
        success: Whether any tiles were selected
        ullon: Upper-left longitude of the rastered area
        ullat: Upper-left latitude of the rastered area
        lrlon: Lower-right longitude of the rastered area
        lrlat: Lower-right latitude of the rastered area
        depth: Quadtree depth of every tile in the grid (0 for the root)
        render_grid: Tile identities, rows north to south, columns west to east
    """

    success: bool
    ullon: float | None = None
    ullat: float | None = None
    lrlon: float | None = None
    lrlat: float | None = None
    depth: int | None = None
    render_grid: tuple[tuple[str, ...], ...] = ()

    @classmethod
    def failed(cls) -> "RasterResult":
        return cls(success=False)

    @property
    def shape(self) -> tuple[int, int]:
        """Grid size as (rows, cols)"""
        if not self.render_grid:
            return (0, 0)
        return (len(self.render_grid), len(self.render_grid[0]))

    @property
    def tiles(self) -> list[str]:
        """All tile identities in row-major order"""
        return [cell for row in self.render_grid for cell in row]

    def to_numpy(self) -> NDArray:
        """
        Convert the grid to a NumPy array

        Returns:
            Array of tile identity strings with shape (rows, cols)
        """
        if not self.render_grid:
            return np.empty((0, 0), dtype=str)
        return np.array(self.render_grid, dtype=str)

    def to_dict(self, locator: Callable[[str], str] | None = None) -> dict[str, Any]:
        """
        Convert to the mapping consumed by the map front end

        Args:
            locator: Maps a tile identity to its image resource
                (default: the identity itself)

        Returns:
            Dict with query_success and, on success, render_grid,
            raster_ul_lon, raster_ul_lat, raster_lr_lon, raster_lr_lat and depth
        """
        if not self.success:
            return {"query_success": False}

        locate = locator or (lambda identity: identity)
        return {
            "render_grid": [[locate(cell) for cell in row] for row in self.render_grid],
            "raster_ul_lon": self.ullon,
            "raster_ul_lat": self.ullat,
            "raster_lr_lon": self.lrlon,
            "raster_lr_lat": self.lrlat,
            "depth": self.depth,
            "query_success": True,
        }
