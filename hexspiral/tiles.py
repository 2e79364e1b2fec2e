"""Tiles of the spiral and the two ways of looking them up.

``FormulaLookup`` derives every tile on demand from the closed-form
index <-> cube conversions, so it never runs out of tiles.  ``TileMap``
materialises the first ``ring_bound`` rings once and answers from a
dictionary afterwards; neighbors beyond its outer ring come back as
``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Mapping, Protocol, Sequence

from .conversions import cube_from_index, index_from_cube
from .coords import Cube, Direction, ring_of
from .neighbors import ring_walk


@dataclass(frozen=True, slots=True)
class Tile:
    index: int
    cube: Cube

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError("tile index must be >= 1")

    @property
    def ring(self) -> int:
        return ring_of(self.cube)

    def __str__(self) -> str:
        return f"Index: {self.index}, Ring: {self.ring}, Position: ({self.cube})"


class LookupStrategy(str, Enum):
    """How tiles are resolved during a search."""

    FORMULA = "formula"
    MAP = "map"


class TileLookup(Protocol):
    def tile_from_index(self, index: int) -> Tile: ...

    def tile_from_cube(self, c: Cube) -> Tile: ...

    def neighbor(self, tile: Tile, direction: Direction) -> Tile | None: ...


class FormulaLookup:
    """Unbounded lookup computing each tile from its index or position."""

    def tile_from_index(self, index: int) -> Tile:
        return Tile(index, cube_from_index(index))

    def tile_from_cube(self, c: Cube) -> Tile:
        return Tile(index_from_cube(c), c)

    def neighbor(self, tile: Tile, direction: Direction) -> Tile:
        return self.tile_from_cube(tile.cube.neighbor(direction))


def generate_tiles(num_rings: int) -> list[Tile]:
    """Materialise rings ``0..num_rings`` in spiral order."""

    if num_rings < 0:
        raise ValueError("num_rings must be non-negative")
    tiles: list[Tile] = []
    index = 1
    for ring in range(num_rings + 1):
        for c in ring_walk(ring):
            tiles.append(Tile(index, c))
            index += 1
    return tiles


class TileMap:
    """Precomputed prefix of the spiral, read-only once built."""

    def __init__(self, ring_bound: int) -> None:
        if ring_bound < 1:
            raise ValueError("ring_bound must be >= 1")
        self.ring_bound = ring_bound
        self._tiles: Sequence[Tile] = tuple(generate_tiles(ring_bound))
        self._by_cube: Mapping[Cube, Tile] = {t.cube: t for t in self._tiles}

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __contains__(self, c: object) -> bool:
        return c in self._by_cube

    @property
    def tiles(self) -> Sequence[Tile]:
        return self._tiles

    def get(self, c: Cube) -> Tile | None:
        return self._by_cube.get(c)

    def tile_from_index(self, index: int) -> Tile:
        if not 1 <= index <= len(self._tiles):
            raise KeyError(index)
        return self._tiles[index - 1]

    def tile_from_cube(self, c: Cube) -> Tile:
        return self._by_cube[c]

    def neighbor(self, tile: Tile, direction: Direction) -> Tile | None:
        return self.get(tile.cube.neighbor(direction))


def build_lookup(strategy: LookupStrategy, *, ring_bound: int) -> TileLookup:
    if strategy is LookupStrategy.MAP:
        return TileMap(ring_bound)
    if strategy is LookupStrategy.FORMULA:
        return FormulaLookup()
    raise ValueError(f"Unknown lookup strategy: {strategy!r}")
