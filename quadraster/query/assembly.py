"""
Grid assembly

Arranges a set of selected tiles into rows and columns by walking from the
upper-left tile with neighbor navigation.
"""

from typing import Iterable

from quadraster.core.exceptions import AddressingError, GeometryError
from quadraster.grid.addressing import depth, identity_to_index, neighbor_down, neighbor_right
from quadraster.grid.base import TileGrid

RenderGrid = tuple[tuple[str, ...], ...]


def corner_tiles(tiles: Iterable[str]) -> tuple[str, str]:
    """
    Upper-left and lower-right tiles of a selection

    Within one level the flat index grows monotonically both rightward and
    downward, so the smallest index is the upper-left corner and the
    largest the lower-right.

    Raises:
        GeometryError: If the tiles are not all at the same depth
    """
    tiles = list(tiles)
    if not tiles:
        raise GeometryError("Cannot assemble an empty tile selection")

    depths = {depth(t) for t in tiles}
    if len(depths) != 1:
        raise GeometryError(f"Selected tiles span several depths: {sorted(depths)}")

    ordered = sorted(tiles, key=identity_to_index)
    return ordered[0], ordered[-1]


def grid_shape(grid: TileGrid, upper_left: str, lower_right: str) -> tuple[int, int]:
    """
    Rows and columns between two corner tiles

    Walks right from the upper-left tile until reaching the lower-right
    tile's western edge, then down until reaching its northern edge.
    """
    target = grid.bounds_of(lower_right)
    cols = rows = 1
    current = upper_left
    try:
        while grid.bounds_of(current).ullon != target.ullon:
            current = neighbor_right(current)
            cols += 1
        while grid.bounds_of(current).ullat != target.ullat:
            current = neighbor_down(current)
            rows += 1
    except AddressingError as e:
        raise GeometryError(
            f"Walked off the tree between {upper_left} and {lower_right}: {e}"
        ) from e
    return rows, cols


def assemble_grid(grid: TileGrid, tiles: Iterable[str]) -> RenderGrid:
    """
    Arrange selected tiles into a row-major grid

    Args:
        grid: Tile grid the tiles belong to
        tiles: Selected tile identities; must fill a rectangle at one depth

    Returns:
        Tuple of rows, each a tuple of tile identities from west to east,
        rows ordered from north to south

    Raises:
        GeometryError: If the tiles do not form a solid rectangle at a single
            depth

    Examples:
        >>> assemble_grid(grid, ["4", "3", "2", "1"])
        (('1', '2'), ('3', '4'))
    """
    tiles = list(tiles)
    upper_left, lower_right = corner_tiles(tiles)
    if upper_left == lower_right:
        return ((upper_left,),)

    rows, cols = grid_shape(grid, upper_left, lower_right)

    result = []
    row_start = upper_left
    try:
        for r in range(rows):
            if r:
                row_start = neighbor_down(row_start)
            row = [row_start]
            for _ in range(cols - 1):
                row.append(neighbor_right(row[-1]))
            result.append(tuple(row))
    except AddressingError as e:
        raise GeometryError(f"Walked off the tree while filling a {rows}x{cols} grid: {e}") from e

    render_grid = tuple(result)
    if render_grid[-1][-1] != lower_right:
        raise GeometryError(
            f"Grid walk ended at {render_grid[-1][-1]}, expected {lower_right}"
        )

    cells = {cell for row in render_grid for cell in row}
    if cells != set(tiles) or len(tiles) != rows * cols:
        raise GeometryError(
            f"Selected tiles do not fill a {rows}x{cols} rectangle "
            f"from {upper_left} to {lower_right}"
        )
    return render_grid
