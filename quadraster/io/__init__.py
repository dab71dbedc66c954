"""
Quadraster IO Module

Access to stored tile images.
"""

from quadraster.io.base import TileStore
from quadraster.io.tile_directory import TileDirectory

__all__ = [
    "TileDirectory",
    "TileStore",
]
