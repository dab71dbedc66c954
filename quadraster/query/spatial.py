"""
Spatial query utilities for GeoJSON-based queries

Supports:
- GeoJSON polygon/multipolygon queries
- Shapely geometry support
- Filtering a raster grid down to tiles touching the geometry itself
"""

import json
from pathlib import Path
from typing import Union

from shapely.geometry import shape
from shapely.errors import GeometryTypeError
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from quadraster.core.result import RasterResult
from quadraster.grid.quadtree import QuadtreeGrid
from quadraster.query.params import RasterQuery
from quadraster.query.rasterer import Rasterer

GeometryLike = Union[dict, BaseGeometry, str, Path]


def geometry_to_query(
    geometry: GeometryLike,
    width: float,
    height: float | None = None,
) -> RasterQuery:
    """
    Build a raster query covering a geometry's bounding box

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file
        width: Viewport width in pixels
        height: Optional viewport height in pixels

    Returns:
        RasterQuery with the upper-left corner at (minx, maxy) and the
        lower-right corner at (maxx, miny)

    Examples:
        >>> geojson = {
        ...     "type": "Polygon",
        ...     "coordinates": [[[-122.28, 37.88], [-122.25, 37.88], [-122.25, 37.86],
        ...                      [-122.28, 37.86], [-122.28, 37.88]]]
        ... }
        >>> query = geometry_to_query(geojson, width=512)
        >>> (query.ullon, query.ullat, query.lrlon, query.lrlat)
        (-122.28, 37.88, -122.25, 37.86)
    """
    geom = _parse_geometry(geometry)
    if geom.is_empty:
        raise ValueError("Cannot build a query from an empty geometry")

    minx, miny, maxx, maxy = geom.bounds
    return RasterQuery(
        ullon=minx,
        ullat=maxy,
        lrlon=maxx,
        lrlat=miny,
        width=width,
        height=height,
    )


def raster_geometry(
    rasterer: Rasterer,
    geometry: GeometryLike,
    width: float,
    height: float | None = None,
) -> RasterResult:
    """
    Raster the bounding box of a geometry

    Examples:
        >>> result = raster_geometry(rasterer, "study_area.geojson", width=1024)
        >>> result.shape
        (3, 4)
    """
    return rasterer.raster(geometry_to_query(geometry, width, height))


def tiles_intersecting_geometry(
    grid: QuadtreeGrid,
    result: RasterResult,
    geometry: GeometryLike,
) -> list[str]:
    """
    Tiles of a raster result whose area actually overlaps a geometry

    A raster grid always covers the full bounding box; for irregular shapes
    many corner tiles may lie outside the shape itself.

    Returns:
        Tile identities in row-major order
    """
    if not result.success:
        return []

    geom = _parse_geometry(geometry)
    return [tile for tile in result.tiles if geom.intersects(grid.bounds_of(tile).to_box())]


def _parse_geometry(geometry: GeometryLike) -> BaseGeometry:
    """
    Parse geometry from various input formats

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file

    Returns:
        Shapely geometry object
    """
    # Already a Shapely geometry
    if isinstance(geometry, BaseGeometry):
        return geometry

    # Path to GeoJSON file
    if isinstance(geometry, (str, Path)):
        path = Path(geometry)
        if path.exists():
            with open(path) as f:
                geojson = json.load(f)
            return _geojson_to_geometry(geojson)
        else:
            raise FileNotFoundError(f"GeoJSON file not found: {geometry}")

    # GeoJSON dict
    if isinstance(geometry, dict):
        return _geojson_to_geometry(geometry)

    raise TypeError(f"Unsupported geometry type: {type(geometry)}")


def _geojson_to_geometry(geojson: dict) -> BaseGeometry:
    """
    Convert GeoJSON dict to Shapely geometry

    Handles both Feature and raw geometry types.

    Raises:
        ValueError: If the GeoJSON is not a geometry, Feature, or
            FeatureCollection shapely can read
    """
    if "type" not in geojson:
        raise ValueError("GeoJSON object has no 'type' member")

    try:
        if geojson["type"] == "FeatureCollection":
            features = geojson.get("features", [])
            if not features:
                raise ValueError("Empty FeatureCollection")
            if len(features) == 1:
                return shape(features[0]["geometry"])
            return unary_union([shape(f["geometry"]) for f in features])

        if geojson["type"] == "Feature":
            return shape(geojson["geometry"])

        return shape(geojson)
    except (KeyError, TypeError, AttributeError, GeometryTypeError) as e:
        raise ValueError(f"Invalid GeoJSON: {e!r}") from e
