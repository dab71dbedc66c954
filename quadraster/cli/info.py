"""
Info CLI command

Shows tile directory information: tile count, depth, and per-level resolution.
"""

import argparse

from quadraster.cli import resolve_config
from quadraster.core.exceptions import QuadrasterError
from quadraster.grid.quadtree import QuadtreeGrid
from quadraster.io.tile_directory import TileDirectory
from quadraster.query.rasterer import Rasterer


def run_info(args: argparse.Namespace) -> int:
    """Run the info command"""
    store = TileDirectory(args.tiles, suffix=args.suffix)

    try:
        rasterer = Rasterer.from_tile_store(store, config=resolve_config(args))
    except QuadrasterError as e:
        print(f"Error: {e}")
        return 1

    config = rasterer.config
    print(f"Tile directory: {store.root.resolve()}")
    print()
    print(f"Tiles: {config.tile_count:,}")
    print(f"Max depth: {config.max_depth}")
    print(f"Tile size: {config.tile_size} px")
    print(f"Root: ({config.root_ullon}, {config.root_ullat}) -> ({config.root_lrlon}, {config.root_lrlat})")
    print()
    _show_levels(rasterer.grid)
    return 0


def _show_levels(grid: QuadtreeGrid) -> None:
    """Print the resolution of every level"""
    print("Levels:")
    print("-" * 40)
    for level in range(grid.max_depth + 1):
        side = 2**level
        print(f"  {level:2d}  {side:4d} x {side:<4d}  LonDPP {grid.lon_dpp_at_depth(level):.6g}")
