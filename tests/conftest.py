"""
Quadraster Test Configuration

Shared pytest fixtures for all tests.
"""

import pytest

from quadraster.core.config import QuadtreeConfig, get_tileset
from quadraster.grid.addressing import index_to_identity, total_tile_count
from quadraster.grid.quadtree import QuadtreeGrid
from quadraster.query.rasterer import Rasterer


@pytest.fixture
def berkeley_config():
    """Berkeley tile set, 7 levels below the root"""
    return get_tileset("berkeley")


@pytest.fixture
def grid(berkeley_config):
    """QuadtreeGrid over the Berkeley tile set"""
    return QuadtreeGrid(berkeley_config)


@pytest.fixture
def rasterer(berkeley_config):
    """Rasterer without a tile store"""
    return Rasterer(berkeley_config)


@pytest.fixture
def rounded_config():
    """Berkeley bounds rounded to four decimals; midpoints are not exact in binary"""
    return QuadtreeConfig(
        root_ullon=-122.2998,
        root_ullat=37.8922,
        root_lrlon=-122.2119,
        root_lrlat=37.8228,
        tile_size=256,
        max_depth=7,
    )


@pytest.fixture
def unit_config():
    """Square tile set from (0, 1) to (1, 0) with 4-pixel tiles"""
    return QuadtreeConfig(
        root_ullon=0.0,
        root_ullat=1.0,
        root_lrlon=1.0,
        root_lrlat=0.0,
        tile_size=4,
        max_depth=3,
    )


@pytest.fixture
def make_tile_dir(tmp_path):
    """Factory creating a directory with a complete tree of empty .png tiles"""

    def _make(max_depth: int, suffix: str = ".png"):
        tile_dir = tmp_path / f"tiles_{max_depth}"
        tile_dir.mkdir()
        for n in range(total_tile_count(max_depth)):
            (tile_dir / f"{index_to_identity(n)}{suffix}").touch()
        return tile_dir

    return _make
