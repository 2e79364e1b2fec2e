"""DataFrame views over tiles and search matches."""

from __future__ import annotations

from typing import Dict, Iterable

import polars as pl

from .search import SearchResult
from .tiles import Tile

_TILE_FRAME_SCHEMA: Dict[str, pl.datatypes.DataType] = {
    "index": pl.Int64,
    "ring": pl.Int64,
    "x": pl.Int64,
    "y": pl.Int64,
    "z": pl.Int64,
}


def tiles_frame(tiles: Iterable[Tile]) -> pl.DataFrame:
    columns: Dict[str, list[int]] = {name: [] for name in _TILE_FRAME_SCHEMA}
    for tile in tiles:
        columns["index"].append(tile.index)
        columns["ring"].append(tile.ring)
        columns["x"].append(tile.cube.x)
        columns["y"].append(tile.cube.y)
        columns["z"].append(tile.cube.z)
    return pl.DataFrame(columns, schema=_TILE_FRAME_SCHEMA)


def matches_by_ring(result: SearchResult) -> pl.DataFrame:
    """Per-ring match counts with the first and last matching index."""

    return (
        tiles_frame(result.matches)
        .group_by("ring")
        .agg(
            pl.len().alias("matches"),
            pl.col("index").min().alias("first_index"),
            pl.col("index").max().alias("last_index"),
        )
        .sort("ring")
    )
