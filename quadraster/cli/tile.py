"""
Tile CLI command

Shows the flat index, position, bounds, and resolution of one tile.
"""

import argparse

from quadraster.cli import resolve_config
from quadraster.core.exceptions import QuadrasterError
from quadraster.grid.addressing import (
    depth,
    identity_to_index,
    index_to_identity,
    tile_position,
    validate_identity,
)
from quadraster.grid.quadtree import QuadtreeGrid
from quadraster.io.tile_directory import TileDirectory


def run_tile(args: argparse.Namespace) -> int:
    """Run the tile command"""
    try:
        identity = _parse_tile(args.tile)
        grid = QuadtreeGrid(resolve_config(args))
        bounds = grid.bounds_of(identity)
    except QuadrasterError as e:
        print(f"Error: {e}")
        return 1

    row, col = tile_position(identity)
    print(f"Tile: {identity}")
    print(f"  Index: {identity_to_index(identity)}")
    print(f"  Depth: {depth(identity)}")
    print(f"  Position: row {row}, col {col}")
    print(f"  Upper-left:  ({bounds.ullon}, {bounds.ullat})")
    print(f"  Lower-right: ({bounds.lrlon}, {bounds.lrlat})")
    print(f"  LonDPP: {grid.lon_dpp(identity):.10g}")

    if args.tiles:
        store = TileDirectory(args.tiles, suffix=args.suffix)
        status = "" if store.exists(identity) else " (missing)"
        print(f"  Image: {store.locate(identity)}{status}")
    return 0


def _parse_tile(text: str) -> str:
    """Tile identity from either an identity or a '#'-prefixed flat index"""
    if text.startswith("#"):
        try:
            index = int(text[1:])
        except ValueError:
            index = text[1:]
        return index_to_identity(index)
    return validate_identity(text)
