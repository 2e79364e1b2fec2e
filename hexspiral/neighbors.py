from __future__ import annotations

from typing import Iterable, Iterator

from .coords import Cube, Direction
from .rings import ring_start

# Legs of a ring walk, starting from the topmost tile.
LEG_ORDER = (
    Direction.SOUTH_WEST,
    Direction.SOUTH,
    Direction.SOUTH_EAST,
    Direction.NORTH_EAST,
    Direction.NORTH,
    Direction.NORTH_WEST,
)

# Order in which the search multiplies neighbor indices.
SEARCH_ORDER = (
    Direction.NORTH,
    Direction.NORTH_EAST,
    Direction.NORTH_WEST,
    Direction.SOUTH,
    Direction.SOUTH_EAST,
    Direction.SOUTH_WEST,
)

# Order used when presenting a tile's surroundings.
DISPLAY_ORDER = (
    Direction.NORTH,
    Direction.NORTH_WEST,
    Direction.SOUTH_WEST,
    Direction.SOUTH,
    Direction.SOUTH_EAST,
    Direction.NORTH_EAST,
)


def neighbor(c: Cube, direction: Direction, distance: int = 1) -> Cube:
    return c.neighbor(direction, distance)


def neighbors_cube(c: Cube, order: Iterable[Direction] = SEARCH_ORDER) -> Iterable[Cube]:
    for d in order:
        yield c.neighbor(d)


def ring_legs(ring: int) -> tuple[tuple[Direction, int], ...]:
    """Direction and length of each leg; the last leg stops short of the start."""

    if ring < 1:
        raise ValueError("ring must be >= 1")
    return tuple(
        (d, ring - 1 if d is Direction.NORTH_WEST else ring) for d in LEG_ORDER
    )


def ring_walk(ring: int) -> Iterator[Cube]:
    """Yield every cube of ``ring`` in spiral index order."""

    if ring == 0:
        yield Cube(0, 0, 0)
        return
    position = ring_start(ring)
    yield position
    for d, length in ring_legs(ring):
        for _ in range(length):
            position = position.neighbor(d)
            yield position
