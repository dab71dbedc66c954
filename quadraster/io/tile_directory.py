"""
Directory-backed tile store

Tiles live as flat files in one directory, named after their identity:
``root.png``, ``1.png`` ... ``4.png``, ``11.png`` and so on.
"""

import logging
from pathlib import Path

from quadraster.core.exceptions import ConfigurationError
from quadraster.grid.addressing import validate_identity

logger = logging.getLogger(__name__)


class TileDirectory:
    """
    Tile store reading from a local directory

    Attributes:
        root: Directory containing the tile images
        suffix: File extension of tile images

    Examples:
        >>> store = TileDirectory("img/")
        >>> store.count_tiles()
        21845
        >>> store.locate("142")
        'img/142.png'
    """

    def __init__(self, root: str | Path, suffix: str = ".png"):
        self.root = Path(root)
        self.suffix = suffix if suffix.startswith(".") else f".{suffix}"

    def count_tiles(self) -> int:
        """
        Count tile images in the directory

        Raises:
            ConfigurationError: If the directory does not exist or cannot be read
        """
        if not self.root.is_dir():
            raise ConfigurationError(f"Tile directory not found: {self.root}")

        try:
            count = sum(
                1 for p in self.root.iterdir() if p.is_file() and p.suffix == self.suffix
            )
        except OSError as e:
            raise ConfigurationError(f"Cannot read tile directory {self.root}: {e}") from e

        logger.debug("Found %d %s tiles in %s", count, self.suffix, self.root)
        return count

    def locate(self, identity: str) -> str:
        """Path of a tile image as a string"""
        validate_identity(identity)
        return str(self.root / f"{identity}{self.suffix}")

    def exists(self, identity: str) -> bool:
        return Path(self.locate(identity)).is_file()

    def __repr__(self):
        return f"<TileDirectory: {self.root} (*{self.suffix})>"
