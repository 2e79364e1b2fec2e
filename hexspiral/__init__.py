"""Hexagonal spiral tiling and neighbor-product search."""

from .coords import ORIGIN, Cube, Direction, ring_of
from .rings import index_from_ring, ring_from_index, ring_start, tiles_in_area, tiles_in_ring
from .neighbors import DISPLAY_ORDER, LEG_ORDER, SEARCH_ORDER, neighbor, neighbors_cube, ring_walk
from .conversions import cube_from_index, index_from_cube
from .tiles import FormulaLookup, LookupStrategy, Tile, TileLookup, TileMap, build_lookup, generate_tiles
from .config import ExhaustionPolicy, SearchConfig
from .search import PrefixExhaustedError, SearchResult, SpiralSearch, is_match, neighbor_product, run_search

__version__ = "0.1.0"

__all__ = [
    "ORIGIN",
    "Cube",
    "Direction",
    "ring_of",
    "index_from_ring",
    "ring_from_index",
    "ring_start",
    "tiles_in_area",
    "tiles_in_ring",
    "DISPLAY_ORDER",
    "LEG_ORDER",
    "SEARCH_ORDER",
    "neighbor",
    "neighbors_cube",
    "ring_walk",
    "cube_from_index",
    "index_from_cube",
    "FormulaLookup",
    "LookupStrategy",
    "Tile",
    "TileLookup",
    "TileMap",
    "build_lookup",
    "generate_tiles",
    "ExhaustionPolicy",
    "SearchConfig",
    "PrefixExhaustedError",
    "SearchResult",
    "SpiralSearch",
    "is_match",
    "neighbor_product",
    "run_search",
]
