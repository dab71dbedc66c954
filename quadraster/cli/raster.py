"""
Raster CLI command

Selects the tile grid for a map view and prints it.
"""

import argparse
import json

from quadraster.cli import resolve_config
from quadraster.core.exceptions import QuadrasterError
from quadraster.io.tile_directory import TileDirectory
from quadraster.query.params import RasterQuery
from quadraster.query.rasterer import Rasterer

BOX_ARGS = ("ullon", "ullat", "lrlon", "lrlat")


def run_raster(args: argparse.Namespace) -> int:
    """Run the raster command"""
    try:
        rasterer = _build_rasterer(args)
        query = _build_query(args)
        result = rasterer.raster(query)
    except (QuadrasterError, ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        locator = rasterer.store.locate if rasterer.store is not None else None
        print(json.dumps(result.to_dict(locator=locator), indent=2))
        return 0

    if not result.success:
        print("Query failed: no tiles overlap the requested view")
        return 0

    rows, cols = result.shape
    print(f"Depth: {result.depth}")
    print(f"Grid: {rows} x {cols} tiles")
    print(f"Upper-left:  ({result.ullon}, {result.ullat})")
    print(f"Lower-right: ({result.lrlon}, {result.lrlat})")
    print()
    width = max(len(tile) for tile in result.tiles)
    for row in result.render_grid:
        print("  " + " ".join(tile.ljust(width) for tile in row))
    return 0


def _build_rasterer(args: argparse.Namespace) -> Rasterer:
    config = resolve_config(args)
    if args.tiles:
        return Rasterer.from_tile_store(TileDirectory(args.tiles), config=config)
    return Rasterer(config.with_max_depth(args.max_depth))


def _build_query(args: argparse.Namespace) -> RasterQuery:
    if args.geojson:
        from quadraster.query.spatial import geometry_to_query

        return geometry_to_query(args.geojson, width=args.width, height=args.height)

    missing = [f"--{name}" for name in BOX_ARGS if getattr(args, name) is None]
    if missing:
        raise ValueError(f"Missing {', '.join(missing)} (or pass --geojson)")

    return RasterQuery(
        ullon=args.ullon,
        ullat=args.ullat,
        lrlon=args.lrlon,
        lrlat=args.lrlat,
        width=args.width,
        height=args.height,
    )
