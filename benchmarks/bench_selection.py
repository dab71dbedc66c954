"""Benchmark script for tile selection and grid assembly"""
import time
import numpy as np

from quadraster import RasterQuery, Rasterer, get_tileset
from quadraster.query.assembly import assemble_grid
from quadraster.query.selection import select_tiles


def random_queries(config, count, width, seed=0):
    """Random view boxes inside the root tile, a tenth of its size"""
    rng = np.random.default_rng(seed)
    lon_span = (config.root_lrlon - config.root_ullon) / 10
    lat_span = (config.root_ullat - config.root_lrlat) / 10
    ullons = rng.uniform(config.root_ullon, config.root_lrlon - lon_span, count)
    ullats = rng.uniform(config.root_lrlat + lat_span, config.root_ullat, count)
    return [
        RasterQuery(lon, lat, lon + lon_span, lat - lat_span, width=width)
        for lon, lat in zip(ullons, ullats)
    ]


def benchmark_selection(rasterer, queries):
    """Average time of select_tiles per query"""
    start = time.perf_counter()
    for query in queries:
        select_tiles(rasterer.grid, query)
    elapsed = time.perf_counter() - start

    return elapsed / len(queries)


def benchmark_raster(rasterer, queries):
    """Average time of a full raster (selection + assembly) per query"""
    start = time.perf_counter()
    for query in queries:
        rasterer.raster(query)
    elapsed = time.perf_counter() - start

    return elapsed / len(queries)


if __name__ == '__main__':
    config = get_tileset("berkeley")
    rasterer = Rasterer(config)

    print("=" * 60)
    print("Tile Selection Benchmark")
    print("=" * 60)
    print(f"Tile set:   berkeley (max depth {config.max_depth})")
    print(f"Queries:    200 per width")
    print("-" * 60)

    for width in (256, 1024, 4096, 16384):
        queries = random_queries(config, 200, width)
        tiles = select_tiles(rasterer.grid, queries[0])
        shape = np.shape(assemble_grid(rasterer.grid, tiles))

        select_time = benchmark_selection(rasterer, queries)
        raster_time = benchmark_raster(rasterer, queries)
        print(f"w={width:<6d} grid {shape[0]:>2d}x{shape[1]:<2d}  "
              f"select {select_time*1000:.3f} ms  raster {raster_time*1000:.3f} ms")

    print("=" * 60)
