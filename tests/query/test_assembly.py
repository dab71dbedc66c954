"""
Tests for grid assembly
"""

import pytest

from quadraster.core.exceptions import GeometryError
from quadraster.grid.addressing import ROOT, neighbor_down, neighbor_right
from quadraster.query.assembly import assemble_grid, corner_tiles, grid_shape
from quadraster.query.params import RasterQuery
from quadraster.query.selection import select_tiles


class TestCornerTiles:
    """Test corner_tiles"""

    def test_corners(self):
        assert corner_tiles(["4", "2", "1", "3"]) == ("1", "4")
        assert corner_tiles(["23", "14", "21", "12"]) == ("12", "23")

    def test_single(self):
        assert corner_tiles([ROOT]) == (ROOT, ROOT)

    def test_empty(self):
        with pytest.raises(GeometryError):
            corner_tiles([])

    def test_mixed_depths(self):
        """Test tiles at different depths are rejected"""
        with pytest.raises(GeometryError, match="depths"):
            corner_tiles(["1", "21", "22"])


class TestGridShape:
    """Test grid_shape"""

    def test_shape(self, grid):
        assert grid_shape(grid, "1", "4") == (2, 2)
        assert grid_shape(grid, "12", "23") == (2, 2)
        assert grid_shape(grid, "11", "44") == (4, 4)
        assert grid_shape(grid, "11", "12") == (1, 2)

    def test_walks_off_tree(self, grid):
        """Test an upper-left tile east of the lower-right tile"""
        with pytest.raises(GeometryError):
            grid_shape(grid, "2", "3")


class TestAssembleGrid:
    """Test assemble_grid"""

    def test_depth_one(self, grid):
        """Test the four quadrants in reading order"""
        assert assemble_grid(grid, ["4", "3", "2", "1"]) == (("1", "2"), ("3", "4"))

    def test_root(self, grid):
        assert assemble_grid(grid, [ROOT]) == ((ROOT,),)

    def test_across_parents(self, grid):
        """Test a 2x2 block straddling all four depth-1 tiles"""
        tiles = ["14", "23", "32", "41"]
        assert assemble_grid(grid, tiles) == (("14", "23"), ("32", "41"))

    def test_single_row(self, grid):
        assert assemble_grid(grid, ["12", "21", "22"]) == (("12", "21", "22"),)

    def test_single_column(self, grid):
        assert assemble_grid(grid, ["31", "13"]) == (("13",), ("31",))

    def test_not_a_rectangle(self, grid):
        """Test an L-shaped selection is rejected"""
        with pytest.raises(GeometryError):
            assemble_grid(grid, ["1", "2", "3"])

    def test_mixed_depths(self, grid):
        with pytest.raises(GeometryError):
            assemble_grid(grid, ["1", "2", "31", "32"])

    def test_duplicates_rejected(self, grid):
        with pytest.raises(GeometryError):
            assemble_grid(grid, ["1", "2", "3", "4", "4"])

    @pytest.mark.parametrize(
        "box,width",
        [
            ((-122.24, 37.87, -122.22, 37.85), 512),
            ((-122.28, 37.88, -122.21, 37.83), 777),
            ((-122.26, 37.86, -122.25, 37.855), 256),
            ((-122.30, 37.90, -122.25, 37.86), 300),
        ],
    )
    def test_rectangular_and_navigable(self, grid, box, width):
        """Test rows are equal length and cells follow neighbor navigation"""
        tiles = select_tiles(grid, RasterQuery(*box, width=width))
        render_grid = assemble_grid(grid, tiles)

        cols = len(render_grid[0])
        assert all(len(row) == cols for row in render_grid)
        assert len(render_grid) * cols == len(tiles)

        row_start = render_grid[0][0]
        for r, row in enumerate(render_grid):
            if r:
                row_start = neighbor_down(row_start)
            cell = row_start
            for c, tile in enumerate(row):
                if c:
                    cell = neighbor_right(cell)
                assert tile == cell

    def test_cells_are_laid_out_geographically(self, grid):
        """Test longitudes grow along rows and latitudes shrink down columns"""
        tiles = select_tiles(grid, RasterQuery(-122.28, 37.88, -122.21, 37.83, width=777))
        render_grid = assemble_grid(grid, tiles)

        for row in render_grid:
            lons = [grid.bounds_of(t).ullon for t in row]
            assert lons == sorted(lons)
            assert len(set(lons)) == len(lons)

        for column in zip(*render_grid):
            lats = [grid.bounds_of(t).ullat for t in column]
            assert lats == sorted(lats, reverse=True)
            assert len(set(lats)) == len(lats)
