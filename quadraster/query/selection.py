"""
Tile selection

Walks the quadtree from the root and picks, along every branch that
overlaps the query box, the shallowest tile whose resolution is at least
as fine as the viewport asks for.
"""

import logging

from quadraster.grid.addressing import ROOT, children
from quadraster.grid.base import TileGrid
from quadraster.query.params import RasterQuery

logger = logging.getLogger(__name__)


def select_tiles(grid: TileGrid, query: RasterQuery) -> list[str]:
    """
    Select the tiles needed to draw a query

    A tile is accepted when it overlaps the query box and either sits at
    the grid's max depth or its level's LonDPP is at or below the query's. Subtrees
    that do not overlap the box are skipped entirely, so the cost grows
    with the number of overlapping tiles rather than the tree size.

    Args:
        grid: Tile grid to select from
        query: Query box and viewport width

    Returns:
        Accepted tile identities in quadrant visiting order. Empty if the
        query box misses the tile set or the viewport width is not positive.

    Examples:
        >>> tiles = select_tiles(grid, RasterQuery(*grid.root.as_tuple(), width=305))
        >>> tiles
        ['1', '2', '3', '4']
    """
    if not query.is_satisfiable:
        logger.debug("Viewport width %r cannot be satisfied", query.width)
        return []

    accepted: list[str] = []
    _collect(grid, query, query.lon_dpp, ROOT, 0, accepted)
    logger.debug("Selected %d tiles for query lon_dpp=%g", len(accepted), query.lon_dpp)
    return accepted


def _collect(
    grid: TileGrid,
    query: RasterQuery,
    query_dpp: float,
    identity: str,
    depth: int,
    accepted: list[str],
) -> None:
    bounds = grid.bounds_of(identity)
    if not grid.intersects(bounds, query):
        return

    # Same cutoff for every tile at a depth, not each tile's own rounded width
    if depth >= grid.max_depth or grid.lon_dpp_at_depth(depth) <= query_dpp:
        accepted.append(identity)
        return

    for child in children(identity):
        _collect(grid, query, query_dpp, child, depth + 1, accepted)
