"""
Quadraster CLI Entry Points

Provides command-line interface for:
- raster: Select the tile grid for a map view
- tile: Show addressing and geometry of a single tile
- info: Show tile directory information
"""

import argparse
import logging
import sys

from quadraster.core.config import QuadtreeConfig, get_tileset


def _add_tileset_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--tileset", default="berkeley", help="Built-in tile set name (default: berkeley)"
    )
    parser.add_argument("--config", help="JSON file with root bounds and tile size")


def resolve_config(args: argparse.Namespace) -> QuadtreeConfig:
    """Tile set bounds selected by --config or --tileset"""
    if getattr(args, "config", None):
        return QuadtreeConfig.from_json(args.config)
    return get_tileset(args.tileset)


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Quadraster - quadtree map tile selection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  quadraster info ./img                     Show tile directory information
  quadraster raster --tiles ./img --ullon -122.24 --ullat 37.87 \\
      --lrlon -122.22 --lrlat 37.85 -w 512  Select tiles for a view
  quadraster raster --max-depth 7 --geojson area.geojson -w 1024
  quadraster tile 142                       Show tile bounds and index
  quadraster tile "#42"                     Show the tile with flat index 42
  quadraster tile 142 --tiles ./img         Also show the tile image path
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Raster command
    raster_parser = subparsers.add_parser("raster", help="Select the tile grid for a map view")
    source = raster_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--tiles", help="Tile image directory (max depth from tile count)")
    source.add_argument("--max-depth", type=int, help="Deepest tile level, without a directory")
    raster_parser.add_argument("--ullon", type=float, help="Upper-left longitude")
    raster_parser.add_argument("--ullat", type=float, help="Upper-left latitude")
    raster_parser.add_argument("--lrlon", type=float, help="Lower-right longitude")
    raster_parser.add_argument("--lrlat", type=float, help="Lower-right latitude")
    raster_parser.add_argument("--geojson", help="GeoJSON file whose bounding box is the view")
    raster_parser.add_argument(
        "-w", "--width", type=float, required=True, help="Viewport width in pixels"
    )
    raster_parser.add_argument("--height", type=float, help="Viewport height in pixels")
    raster_parser.add_argument("--json", action="store_true", help="Print the front-end mapping")
    _add_tileset_arguments(raster_parser)

    # Tile command
    tile_parser = subparsers.add_parser("tile", help="Show addressing and geometry of a tile")
    tile_parser.add_argument("tile", help="Tile identity (e.g. 142, root) or flat index (#42)")
    tile_parser.add_argument("--tiles", help="Tile image directory to look the image up in")
    tile_parser.add_argument("--suffix", default=".png", help="Tile file extension")
    _add_tileset_arguments(tile_parser)

    # Info command
    info_parser = subparsers.add_parser("info", help="Show tile directory information")
    info_parser.add_argument("tiles", help="Tile image directory")
    info_parser.add_argument("--suffix", default=".png", help="Tile file extension")
    _add_tileset_arguments(info_parser)

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(message)s" if not args.verbose else "%(levelname)s: %(message)s"
    )

    if args.command == "raster":
        from quadraster.cli.raster import run_raster

        code = run_raster(args)
    elif args.command == "tile":
        from quadraster.cli.tile import run_tile

        code = run_tile(args)
    elif args.command == "info":
        from quadraster.cli.info import run_info

        code = run_info(args)
    else:
        parser.print_help()
        sys.exit(1)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
