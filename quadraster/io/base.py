"""
Tile Store Protocol

Interface to wherever the pre-rendered tile images live.
"""

from typing import Protocol


class TileStore(Protocol):
    """
    Abstract tile image store

    Tile selection never reads pixels. It only needs the number of tiles at
    startup (to derive the tree depth) and a way to turn identities into
    resource locators for the front end.
    """

    def count_tiles(self) -> int:
        """Number of tile images available"""
        ...

    def locate(self, identity: str) -> str:
        """Resource locator for a tile image (e.g. a file path or URL)"""
        ...

    def exists(self, identity: str) -> bool:
        """Check if a tile image exists"""
        ...
