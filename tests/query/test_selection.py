"""
Tests for tile selection
"""

import pytest

from quadraster.grid.addressing import ROOT, depth
from quadraster.query.params import RasterQuery
from quadraster.query.selection import select_tiles

ROOT_BOX = (-122.2998046875, 37.892195547244356, -122.2119140625, 37.82280243352756)


class TestSelectTiles:
    """Test select_tiles"""

    def test_full_extent(self, grid):
        """Test full view at 305 px picks the four depth-1 tiles"""
        query = RasterQuery(-122.2998, 37.8922, -122.2119, 37.8228, width=305)
        assert select_tiles(grid, query) == ["1", "2", "3", "4"]

    def test_coarse_view_picks_root(self, grid):
        """Test a small viewport is served by the root tile alone"""
        query = RasterQuery(*ROOT_BOX, width=100)
        assert select_tiles(grid, query) == [ROOT]

    def test_exact_resolution_match(self, grid):
        """Test a tile whose LonDPP equals the query's is accepted"""
        query = RasterQuery(*ROOT_BOX, width=256)
        assert select_tiles(grid, query) == [ROOT]

    def test_clamped_to_max_depth(self, grid):
        """Test huge widths stop at the deepest level"""
        query = RasterQuery(-122.24, 37.87, -122.239, 37.869, width=1e9)
        tiles = select_tiles(grid, query)
        assert tiles
        assert all(depth(t) == grid.max_depth for t in tiles)

    def test_infinite_width_clamps(self, grid):
        """Test an infinite width behaves like any huge width"""
        query = RasterQuery(-122.24, 37.87, -122.239, 37.869, width=float("inf"))
        tiles = select_tiles(grid, query)
        assert tiles
        assert {depth(t) for t in tiles} == {grid.max_depth}

    def test_shallow_tree_clamp(self, unit_config):
        """Test clamping on a tree with few levels"""
        from quadraster.grid.quadtree import QuadtreeGrid

        grid = QuadtreeGrid(unit_config.with_max_depth(1))
        tiles = select_tiles(grid, RasterQuery(0.0, 1.0, 1.0, 0.0, width=1e6))
        assert tiles == ["1", "2", "3", "4"]

    def test_south_of_root(self, grid):
        """Test a box entirely south of the tile set selects nothing"""
        query = RasterQuery(-122.25, 37.0, -122.22, 37.0, width=256)
        assert select_tiles(grid, query) == []

    @pytest.mark.parametrize(
        "box",
        [
            (-123.0, 37.85, -122.9, 37.84),  # west
            (-122.1, 37.85, -122.0, 37.84),  # east
            (-122.25, 38.5, -122.22, 38.4),  # north
        ],
    )
    def test_outside_root(self, grid, box):
        """Test boxes outside the root never select tiles"""
        assert select_tiles(grid, RasterQuery(*box, width=512)) == []

    @pytest.mark.parametrize("width", [0, -256, float("nan")])
    def test_unusable_width(self, grid, width):
        """Test non-positive or NaN widths select nothing"""
        assert select_tiles(grid, RasterQuery(*ROOT_BOX, width=width)) == []

    def test_pruning_keeps_to_quadrant(self, grid):
        """Test a box inside quadrant 1 only selects tiles under it"""
        query = RasterQuery(-122.29, 37.89, -122.27, 37.87, width=512)
        tiles = select_tiles(grid, query)
        assert tiles
        assert all(t.startswith("1") for t in tiles)

    def test_box_crossing_quadrants(self, grid):
        """Test a box around the root center touches all four quadrants"""
        query = RasterQuery(-122.26, 37.86, -122.25, 37.855, width=256)
        tiles = select_tiles(grid, query)
        assert {t[0] for t in tiles} == {"1", "2", "3", "4"}

    @pytest.mark.parametrize(
        "box,width",
        [
            ((-122.24, 37.87, -122.22, 37.85), 512),
            ((-122.2998, 37.8922, -122.2119, 37.8228), 1024),
            ((-122.28, 37.88, -122.21, 37.83), 777),
            ((-122.30, 37.90, -122.25, 37.86), 300),
            ((-122.23, 37.845, -122.229, 37.8449), 64),
        ],
    )
    def test_single_depth(self, grid, box, width):
        """Test every accepted tile sits at the first sufficient depth"""
        query = RasterQuery(*box, width=width)
        tiles = select_tiles(grid, query)

        expected = next(
            (d for d in range(grid.max_depth + 1) if grid.lon_dpp_at_depth(d) <= query.lon_dpp),
            grid.max_depth,
        )
        assert tiles
        assert {depth(t) for t in tiles} == {expected}

    def test_all_selected_tiles_intersect(self, grid):
        """Test no selected tile lies outside the query box"""
        query = RasterQuery(-122.28, 37.88, -122.21, 37.83, width=777)
        for tile in select_tiles(grid, query):
            assert grid.intersects(grid.bounds_of(tile), query)


class TestSelectTilesRoundedBounds:
    """Test selection when tile widths are not exact binary fractions"""

    @pytest.fixture
    def rounded_grid(self, rounded_config):
        from quadraster.grid.quadtree import QuadtreeGrid

        return QuadtreeGrid(rounded_config)

    def test_full_extent(self, rounded_grid, rounded_config):
        query = RasterQuery(*rounded_config.root_bounds, width=305)
        assert select_tiles(rounded_grid, query) == ["1", "2", "3", "4"]

    @pytest.mark.parametrize("level", range(6))
    def test_level_boundary(self, rounded_grid, rounded_config, level):
        """Test a query exactly at a level's LonDPP takes that whole level"""
        query = RasterQuery(*rounded_config.root_bounds, width=256 * 2**level)
        tiles = select_tiles(rounded_grid, query)

        assert {depth(t) for t in tiles} == {level}
        assert len(tiles) == 4**level

    def test_siblings_share_a_depth(self, rounded_grid, rounded_config):
        """Test every viewport width keeps the selection on one level"""
        for width in range(1, 3001, 3):
            query = RasterQuery(*rounded_config.root_bounds, width=width)
            assert len({depth(t) for t in select_tiles(rounded_grid, query)}) == 1
