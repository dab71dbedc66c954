"""
Quadraster Grid Module

Quadtree tile addressing and geometry.
"""

from quadraster.grid.addressing import (
    ROOT,
    children,
    depth,
    identity_to_index,
    index_to_identity,
    neighbor_down,
    neighbor_right,
    parent,
    tile_position,
)
from quadraster.grid.base import TileBounds, TileGrid
from quadraster.grid.quadtree import QuadtreeGrid

__all__ = [
    "QuadtreeGrid",
    "ROOT",
    "TileBounds",
    "TileGrid",
    "children",
    "depth",
    "identity_to_index",
    "index_to_identity",
    "neighbor_down",
    "neighbor_right",
    "parent",
    "tile_position",
]
